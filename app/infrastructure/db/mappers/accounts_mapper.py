from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID

from app.domain.entities.connection import Connection
from app.domain.entities.user import User
from app.domain.entities.user_settings import Onboarding, UserPreference


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        email=row["email"],
        name=row["name"],
        avatar_url=row.get("avatar_url"),
        provider=row["provider"],
        provider_id=row["provider_id"],
        is_active=bool(row["is_active"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_connection(row: Mapping[str, Any]) -> Connection:
    return Connection(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        name=row["name"],
        phone_number=row["phone_number"],
        relationship=row["relationship"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_user_preference(row: Mapping[str, Any]) -> UserPreference:
    return UserPreference(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        notification_time=row.get("notification_time"),
        timezone=row.get("timezone"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_onboarding(row: Mapping[str, Any]) -> Onboarding:
    return Onboarding(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        notification_time_setting=row.get("notification_time_setting"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def coerce_uuid(value: str | None) -> str | None:
    """Canonical UUID string, or None when ``value`` is not a UUID."""
    if not value:
        return None
    try:
        return str(UUID(str(value)))
    except ValueError:
        return None
