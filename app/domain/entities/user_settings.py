from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time


@dataclass(frozen=True)
class UserPreference:
    id: str
    user_id: str
    notification_time: time | None
    timezone: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Onboarding:
    id: str
    user_id: str
    notification_time_setting: datetime | None
    created_at: datetime
    updated_at: datetime
