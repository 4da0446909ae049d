from __future__ import annotations

from typing import Protocol

from app.application.dto.auth import GoogleIdentityInfo
from app.application.dto.result import Result


class GoogleOauthPort(Protocol):
    def verify_id_token(self, *, id_token: str) -> Result[GoogleIdentityInfo]:
        ...
