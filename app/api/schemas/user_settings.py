from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UserPreferenceParams(BaseModel):
    notification_time: str | None = None
    timezone: str | None = None


class UserPreferenceRequest(BaseModel):
    user_preference: UserPreferenceParams | None = None


class UserPreferenceOut(BaseModel):
    id: str
    notification_time: str | None
    timezone: str | None
    created_at: datetime
    updated_at: datetime


class UserPreferenceResponse(BaseModel):
    success: bool = True
    data: UserPreferenceOut


class UserPreferenceUpdateResponse(BaseModel):
    success: bool = True
    data: UserPreferenceOut
    message: str


class OnboardingOut(BaseModel):
    id: str
    notification_time_setting: datetime | None
    created_at: datetime
    updated_at: datetime


class OnboardingResponse(BaseModel):
    success: bool = True
    data: OnboardingOut
