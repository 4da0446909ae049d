from __future__ import annotations

from datetime import datetime, time
from typing import Protocol

from app.domain.entities.user_settings import Onboarding, UserPreference


class UserPreferencePort(Protocol):
    def get_or_create_user_preference(self, *, user_id: str, now: datetime) -> UserPreference:
        ...

    def update_user_preference(
        self,
        *,
        user_id: str,
        notification_time: time | None,
        timezone: str | None,
        now: datetime,
    ) -> UserPreference:
        ...


class OnboardingPort(Protocol):
    def get_or_create_onboarding(self, *, user_id: str, now: datetime) -> Onboarding:
        ...

    def set_onboarding_notification_time(self, *, user_id: str, now: datetime) -> Onboarding:
        ...
