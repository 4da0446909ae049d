from __future__ import annotations

import logging
from typing import Any

from google.auth import exceptions as google_exceptions
from google.auth.transport import requests
from google.oauth2 import id_token

from app.application.dto.auth import GoogleIdentityInfo
from app.application.dto.result import Ok, Result, fail
from app.application.ports.google_oauth_port import GoogleOauthPort
from app.domain.entities.auth_error import AuthErrorKind


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class GoogleOidcClient(GoogleOauthPort):
    def __init__(self, *, client_id: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS):
        self._client_id = client_id
        self._timeout_seconds = timeout_seconds

    def verify_id_token(self, *, id_token: str) -> Result[GoogleIdentityInfo]:
        if not id_token or not id_token.strip():
            return fail(AuthErrorKind.ASSERTION_INVALID, "Invalid or expired token")
        if not self._client_id:
            logger.error("Google Client ID not configured")
            return fail(AuthErrorKind.VERIFIER_UNAVAILABLE, "Authentication service unavailable")

        try:
            payload = id_token_verify(
                token=id_token,
                audience=self._client_id,
                timeout_seconds=self._timeout_seconds,
            )
        except (ValueError, google_exceptions.GoogleAuthError) as exc:
            logger.error("Google token validation failed: %s", exc)
            return fail(AuthErrorKind.ASSERTION_INVALID, "Invalid or expired token")

        subject = _claim(payload, "sub")
        email = _claim(payload, "email")
        name = _claim(payload, "name")
        if not subject or not email or not name:
            logger.error("Invalid Google token payload: missing required fields")
            return fail(AuthErrorKind.INCOMPLETE_PAYLOAD, "Invalid token payload")

        if not _email_verified(payload.get("email_verified", False)):
            logger.warning("Unverified email attempted sign in: %s", email)
            return fail(AuthErrorKind.EMAIL_UNVERIFIED, "Email not verified with Google")

        picture = payload.get("picture") if isinstance(payload.get("picture"), str) else None
        return Ok(
            GoogleIdentityInfo(
                subject=subject,
                email=email,
                email_verified=True,
                name=name,
                picture=picture or None,
            )
        )


def _claim(payload: dict[str, Any], name: str) -> str | None:
    value = payload.get(name)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _email_verified(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() == "true"
    return raw is True


class _BoundedRequest(requests.Request):
    """Transport that never waits on Google longer than ``timeout_seconds``."""

    def __init__(self, timeout_seconds: float):
        super().__init__()
        self._timeout_seconds = timeout_seconds

    def __call__(self, url, method="GET", body=None, headers=None, timeout=None, **kwargs):
        return super().__call__(
            url,
            method=method,
            body=body,
            headers=headers,
            timeout=timeout or self._timeout_seconds,
            **kwargs,
        )


def id_token_verify(*, token: str, audience: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> dict:
    request = _BoundedRequest(timeout_seconds)
    return id_token.verify_oauth2_token(token, request, audience)
