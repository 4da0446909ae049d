from __future__ import annotations

from datetime import datetime, timezone

from app.application.dto.auth import AuthUserOutput
from app.domain.entities.user import User


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_auth_user_output(user: User) -> AuthUserOutput:
    return AuthUserOutput(
        id=user.id,
        email=user.email,
        name=user.name,
        avatar_url=user.avatar_url,
    )
