from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.application.dto.auth import IssuedCredential, SessionClaims
from app.application.dto.result import Result


class TokenPort(Protocol):
    def is_signing_configured(self) -> bool:
        ...

    def issue(self, *, user_id: str, email: str, now: datetime) -> Result[IssuedCredential]:
        ...

    def decode(self, *, token: str, now: datetime) -> Result[SessionClaims]:
        ...
