from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from app.application.dto.auth import IssuedCredential, SessionClaims
from app.application.dto.result import Ok, Result, fail
from app.application.ports.token_port import TokenPort
from app.domain.entities.auth_error import AuthErrorKind


logger = logging.getLogger(__name__)

DEFAULT_TTL_DAYS = 730

TOKEN_GENERATION_FAILED = "Token generation failed"


class JwtTokenService(TokenPort):
    def __init__(
        self,
        *,
        jwt_secret: str,
        algorithm: str = "HS256",
        ttl_days: int = DEFAULT_TTL_DAYS,
    ):
        self._jwt_secret = jwt_secret
        self._algorithm = algorithm
        self._ttl = timedelta(days=ttl_days)

    def is_signing_configured(self) -> bool:
        return bool(self._jwt_secret)

    def issue(self, *, user_id: str, email: str, now: datetime) -> Result[IssuedCredential]:
        if not self.is_signing_configured():
            logger.error("JWT secret key not configured; cannot issue session token.")
            return fail(AuthErrorKind.SIGNING_UNAVAILABLE, TOKEN_GENERATION_FAILED)
        if not _is_persisted_id(user_id):
            logger.error("Refusing to issue session token for invalid user id %r.", user_id)
            return fail(AuthErrorKind.INVALID_SUBJECT, TOKEN_GENERATION_FAILED)

        exp = now + self._ttl
        payload = {
            "user_id": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        try:
            token = jwt.encode(payload, self._jwt_secret, algorithm=self._algorithm)
        except jwt.PyJWTError as exc:
            logger.error("JWT encoding failed: %s", exc)
            return fail(AuthErrorKind.SIGNING_UNAVAILABLE, TOKEN_GENERATION_FAILED)
        return Ok(IssuedCredential(token=token, issued_at=now, expires_at=exp))

    def decode(self, *, token: str, now: datetime) -> Result[SessionClaims]:
        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            return fail(AuthErrorKind.EXPIRED, "Token expired")
        except jwt.MissingRequiredClaimError as exc:
            logger.warning("Session token missing claim: %s", exc.claim)
            return fail(AuthErrorKind.MISSING_CLAIM, "Invalid token format")
        except jwt.PyJWTError as exc:
            logger.warning("Session token decode failed: %s", exc)
            return fail(AuthErrorKind.MALFORMED, "Invalid token")

        user_id = payload.get("user_id")
        if user_id is None or str(user_id).strip() == "":
            logger.warning("Session token payload missing user_id.")
            return fail(AuthErrorKind.MISSING_CLAIM, "Invalid token format")

        expires_at = _from_timestamp(payload["exp"])
        # expiry is re-evaluated against the caller's clock, not only PyJWT's
        if expires_at <= now:
            return fail(AuthErrorKind.EXPIRED, "Token expired")

        iat = payload.get("iat")
        email = payload.get("email")
        return Ok(
            SessionClaims(
                user_id=str(user_id),
                email=email if isinstance(email, str) else None,
                issued_at=_from_timestamp(iat) if isinstance(iat, (int, float)) else None,
                expires_at=expires_at,
            )
        )


def _from_timestamp(value: int | float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


def _is_persisted_id(user_id: str | None) -> bool:
    if not user_id or not isinstance(user_id, str):
        return False
    try:
        UUID(user_id)
    except ValueError:
        return False
    return True
