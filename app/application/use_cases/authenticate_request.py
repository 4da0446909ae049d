from __future__ import annotations

import logging
from datetime import datetime

from app.application.dto.auth import AuthContext
from app.application.dto.result import Err, Ok, Result, fail
from app.application.ports.token_port import TokenPort
from app.application.ports.user_port import UserPort
from app.core.auth import extract_credential
from app.domain.entities.auth_error import AuthErrorKind
from app.application.use_cases.auth_common import utcnow


logger = logging.getLogger(__name__)


class AuthenticateRequestUseCase:
    """Turn an Authorization header into the caller's user, or a typed failure.

    Steps run in order and stop at the first failure.
    """

    def __init__(self, *, token_port: TokenPort, user_port: UserPort):
        self._token_port = token_port
        self._user_port = user_port

    def execute(self, *, authorization: str | None, now: datetime | None = None) -> Result[AuthContext]:
        now = now or utcnow()

        token = extract_credential(authorization)
        if token is None:
            return fail(AuthErrorKind.MISSING_CREDENTIAL, "Missing authorization token")

        if not self._token_port.is_signing_configured():
            logger.error("JWT secret key not configured")
            return fail(AuthErrorKind.SIGNING_UNAVAILABLE, "Authentication service unavailable")

        decoded = self._token_port.decode(token=token, now=now)
        if isinstance(decoded, Err):
            return decoded
        claims = decoded.value

        if claims.expires_at <= now:
            return fail(AuthErrorKind.EXPIRED, "Token expired")

        user = self._user_port.get_user_by_id(user_id=claims.user_id)
        if user is None:
            return fail(AuthErrorKind.UNKNOWN_USER, "User not found")

        if not user.is_active:
            logger.warning("Inactive user attempted access: %s", user.email)
            return fail(AuthErrorKind.ACCOUNT_INACTIVE, "Account inactive")

        return Ok(AuthContext(user=user, claims=claims))
