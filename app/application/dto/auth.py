from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.user import AuthProvider, User


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    email: str
    name: str
    avatar_url: str | None


@dataclass(frozen=True)
class SignInGoogleInput:
    id_token: str


@dataclass(frozen=True)
class SignInOutput:
    token: str
    user: AuthUserOutput


@dataclass(frozen=True)
class GoogleIdentityInfo:
    subject: str
    email: str
    email_verified: bool
    name: str
    picture: str | None


@dataclass(frozen=True)
class ResolveUserInput:
    provider: AuthProvider
    provider_id: str
    email: str
    name: str
    avatar_url: str | None


@dataclass(frozen=True)
class IssuedCredential:
    token: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class SessionClaims:
    user_id: str
    email: str | None
    issued_at: datetime | None
    expires_at: datetime


@dataclass(frozen=True)
class AuthContext:
    user: User
    claims: SessionClaims
