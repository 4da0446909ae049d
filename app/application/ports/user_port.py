from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.user import AuthProvider, User


class UserPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def get_user_by_identity(self, *, provider: AuthProvider, provider_id: str) -> User | None:
        ...

    def upsert_user_by_identity(
        self,
        *,
        user_id: str,
        provider: AuthProvider,
        provider_id: str,
        email: str,
        name: str,
        avatar_url: str | None,
        now: datetime,
    ) -> User:
        """Create or refresh the user keyed by (provider, provider_id).

        Raises DuplicateIdentityError when another unique key collides.
        """
        ...
