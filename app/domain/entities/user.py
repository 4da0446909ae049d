from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


AuthProvider = Literal["google"]

GOOGLE_PROVIDER: AuthProvider = "google"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str
    avatar_url: str | None
    provider: AuthProvider
    provider_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
