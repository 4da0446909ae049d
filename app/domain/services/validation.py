from __future__ import annotations

import re
from datetime import time

from app.domain.entities.connection import RELATIONSHIPS


CONNECTION_NAME_MAX_LENGTH = 100
TIMEZONE_MAX_LENGTH = 50

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user_fields(
    *,
    email: str | None,
    name: str | None,
    provider: str | None,
    provider_id: str | None,
) -> list[str]:
    errors: list[str] = []
    if _blank(email):
        errors.append("Email can't be blank")
    elif not _EMAIL_RE.match(email.strip()):
        errors.append("Email is invalid")
    if _blank(name):
        errors.append("Name can't be blank")
    if _blank(provider):
        errors.append("Provider can't be blank")
    if _blank(provider_id):
        errors.append("Provider id can't be blank")
    return errors


def validate_connection_fields(
    *,
    name: str | None,
    phone_number: str | None,
    relationship: str | None,
) -> list[str]:
    errors: list[str] = []
    if _blank(name):
        errors.append("Name can't be blank")
    elif len(name.strip()) > CONNECTION_NAME_MAX_LENGTH:
        errors.append(f"Name is too long (maximum is {CONNECTION_NAME_MAX_LENGTH} characters)")
    if _blank(phone_number):
        errors.append("Phone number can't be blank")
    if _blank(relationship):
        errors.append("Relationship can't be blank")
    elif relationship not in RELATIONSHIPS:
        errors.append(f"Relationship '{relationship}' is not a valid relationship")
    return errors


def validate_timezone(timezone: str | None) -> list[str]:
    if timezone is not None and len(timezone) > TIMEZONE_MAX_LENGTH:
        return [f"Timezone is too long (maximum is {TIMEZONE_MAX_LENGTH} characters)"]
    return []


def parse_notification_time(value: time | str | None) -> tuple[time | None, list[str]]:
    """Accept ``HH:MM`` or ``HH:MM:SS``; a blank value clears the setting."""
    if value is None or isinstance(value, time):
        return value, []
    raw = value.strip()
    if not raw:
        return None, []
    match = _TIME_RE.match(raw)
    if match is None:
        return None, ["Notification time is invalid"]
    hour, minute, second = int(match.group(1)), int(match.group(2)), int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        return None, ["Notification time is invalid"]
    return time(hour, minute, second), []
