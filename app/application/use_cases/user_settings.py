from __future__ import annotations

from app.application.dto.resources import UpdateUserPreferenceInput
from app.application.ports.user_settings_port import OnboardingPort, UserPreferencePort
from app.domain.entities.user_settings import Onboarding, UserPreference
from app.domain.exceptions import ResourceValidationError
from app.domain.services.validation import parse_notification_time, validate_timezone
from app.application.use_cases.auth_common import utcnow


class GetUserPreferenceUseCase:
    def __init__(self, *, user_preference_port: UserPreferencePort):
        self._user_preference_port = user_preference_port

    def execute(self, *, user_id: str) -> UserPreference:
        return self._user_preference_port.get_or_create_user_preference(user_id=user_id, now=utcnow())


class UpdateUserPreferenceUseCase:
    """Update notification settings and stamp the onboarding step as done."""

    def __init__(self, *, user_preference_port: UserPreferencePort, onboarding_port: OnboardingPort):
        self._user_preference_port = user_preference_port
        self._onboarding_port = onboarding_port

    def execute(self, command: UpdateUserPreferenceInput) -> UserPreference:
        now = utcnow()
        current = self._user_preference_port.get_or_create_user_preference(user_id=command.user_id, now=now)

        notification_time, errors = parse_notification_time(
            command.changes.get("notification_time", current.notification_time)
        )
        timezone = command.changes.get("timezone", current.timezone)
        errors = errors + validate_timezone(timezone)
        if errors:
            raise ResourceValidationError(errors)

        updated = self._user_preference_port.update_user_preference(
            user_id=command.user_id,
            notification_time=notification_time,
            timezone=timezone,
            now=now,
        )
        self._onboarding_port.set_onboarding_notification_time(user_id=command.user_id, now=now)
        return updated


class GetOnboardingUseCase:
    def __init__(self, *, onboarding_port: OnboardingPort):
        self._onboarding_port = onboarding_port

    def execute(self, *, user_id: str) -> Onboarding:
        return self._onboarding_port.get_or_create_onboarding(user_id=user_id, now=utcnow())
