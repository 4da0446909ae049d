from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.domain.entities.auth_error import AuthError, AuthErrorKind


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: AuthError

    @property
    def kind(self) -> AuthErrorKind:
        return self.error.kind


Result = Union[Ok[T], Err]


def fail(kind: AuthErrorKind, message: str, details: list[str] | None = None) -> Err:
    return Err(AuthError(kind=kind, message=message, details=list(details or [])))
