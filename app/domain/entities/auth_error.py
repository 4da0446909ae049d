from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorCategory(str, Enum):
    CLIENT_INPUT = "client_input"
    UNAUTHENTICATED = "unauthenticated"
    CONFLICT = "conflict"
    VALIDATION_FAILED = "validation_failed"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UNEXPECTED = "unexpected"


class AuthErrorKind(str, Enum):
    # request shape
    MISSING_PARAMETER = "missing_parameter"
    # identity assertion
    ASSERTION_INVALID = "assertion_invalid"
    INCOMPLETE_PAYLOAD = "incomplete_payload"
    EMAIL_UNVERIFIED = "email_unverified"
    VERIFIER_UNAVAILABLE = "verifier_unavailable"
    # user resolution
    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_IDENTITY = "duplicate_identity"
    # session credential
    SIGNING_UNAVAILABLE = "signing_unavailable"
    INVALID_SUBJECT = "invalid_subject"
    EXPIRED = "expired"
    MALFORMED = "malformed"
    MISSING_CLAIM = "missing_claim"
    # request gate
    MISSING_CREDENTIAL = "missing_credential"
    UNKNOWN_USER = "unknown_user"
    ACCOUNT_INACTIVE = "account_inactive"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES: dict[AuthErrorKind, ErrorCategory] = {
    AuthErrorKind.MISSING_PARAMETER: ErrorCategory.CLIENT_INPUT,
    AuthErrorKind.ASSERTION_INVALID: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.INCOMPLETE_PAYLOAD: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.EMAIL_UNVERIFIED: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.VERIFIER_UNAVAILABLE: ErrorCategory.SERVICE_UNAVAILABLE,
    AuthErrorKind.VALIDATION_FAILED: ErrorCategory.VALIDATION_FAILED,
    AuthErrorKind.DUPLICATE_IDENTITY: ErrorCategory.CONFLICT,
    AuthErrorKind.SIGNING_UNAVAILABLE: ErrorCategory.SERVICE_UNAVAILABLE,
    AuthErrorKind.INVALID_SUBJECT: ErrorCategory.UNEXPECTED,
    AuthErrorKind.EXPIRED: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.MALFORMED: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.MISSING_CLAIM: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.MISSING_CREDENTIAL: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.UNKNOWN_USER: ErrorCategory.UNAUTHENTICATED,
    AuthErrorKind.ACCOUNT_INACTIVE: ErrorCategory.UNAUTHENTICATED,
}


@dataclass(frozen=True)
class AuthError:
    """Tagged failure of an authentication step.

    ``message`` is safe to show to clients; provider or library detail is
    only ever logged.
    """

    kind: AuthErrorKind
    message: str
    details: list[str] = field(default_factory=list)

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category
