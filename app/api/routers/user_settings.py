from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_current_user,
    get_get_onboarding_use_case,
    get_get_user_preference_use_case,
    get_update_user_preference_use_case,
)
from app.api.errors import ApiError, resource_input_error
from app.api.schemas.user_settings import (
    OnboardingOut,
    OnboardingResponse,
    UserPreferenceOut,
    UserPreferenceRequest,
    UserPreferenceResponse,
    UserPreferenceUpdateResponse,
)
from app.application.dto.auth import AuthContext
from app.application.dto.resources import UpdateUserPreferenceInput
from app.application.use_cases.user_settings import (
    GetOnboardingUseCase,
    GetUserPreferenceUseCase,
    UpdateUserPreferenceUseCase,
)
from app.domain.entities.user_settings import Onboarding, UserPreference
from app.domain.exceptions import ResourceValidationError


router = APIRouter()


def _preference_out(preference: UserPreference) -> UserPreferenceOut:
    notification_time = preference.notification_time
    return UserPreferenceOut(
        id=preference.id,
        notification_time=notification_time.strftime("%H:%M") if notification_time else None,
        timezone=preference.timezone,
        created_at=preference.created_at,
        updated_at=preference.updated_at,
    )


def _onboarding_out(onboarding: Onboarding) -> OnboardingOut:
    return OnboardingOut(
        id=onboarding.id,
        notification_time_setting=onboarding.notification_time_setting,
        created_at=onboarding.created_at,
        updated_at=onboarding.updated_at,
    )


@router.get("/v1/user_preferences", response_model=UserPreferenceResponse)
def get_user_preference(
    context: AuthContext = Depends(get_current_user),
    use_case: GetUserPreferenceUseCase = Depends(get_get_user_preference_use_case),
):
    preference = use_case.execute(user_id=context.user.id)
    return UserPreferenceResponse(data=_preference_out(preference))


@router.api_route("/v1/user_preferences", methods=["PUT", "PATCH"], response_model=UserPreferenceUpdateResponse)
def update_user_preference(
    req: UserPreferenceRequest | None = None,
    context: AuthContext = Depends(get_current_user),
    use_case: UpdateUserPreferenceUseCase = Depends(get_update_user_preference_use_case),
):
    if req is None or req.user_preference is None:
        raise resource_input_error("Missing user_preference parameter")
    try:
        preference = use_case.execute(
            UpdateUserPreferenceInput(
                user_id=context.user.id,
                changes=req.user_preference.model_dump(exclude_unset=True),
            )
        )
    except ResourceValidationError as exc:
        raise ApiError(422, {"success": False, "errors": exc.messages}) from exc
    return UserPreferenceUpdateResponse(
        data=_preference_out(preference),
        message="User preferences updated successfully",
    )


@router.get("/v1/onboarding", response_model=OnboardingResponse)
def get_onboarding(
    context: AuthContext = Depends(get_current_user),
    use_case: GetOnboardingUseCase = Depends(get_get_onboarding_use_case),
):
    onboarding = use_case.execute(user_id=context.user.id)
    return OnboardingResponse(data=_onboarding_out(onboarding))
