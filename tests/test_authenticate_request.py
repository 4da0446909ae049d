from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.dto.auth import SessionClaims
from app.application.dto.result import Err, Ok
from app.application.use_cases.auth_common import utcnow
from app.application.use_cases.authenticate_request import AuthenticateRequestUseCase
from app.core.auth import extract_credential
from app.domain.entities.auth_error import AuthErrorKind
from app.infrastructure.security.token_service import JwtTokenService


class FakeTokenPort:
    def __init__(self, claims: SessionClaims):
        self.claims = claims

    def is_signing_configured(self) -> bool:
        return True

    def issue(self, *, user_id, email, now):
        raise AssertionError("not used")

    def decode(self, *, token, now):
        return Ok(self.claims)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc.def.ghi", "abc.def.ghi"),
        ("BEARER   abc.def.ghi", "abc.def.ghi"),
        ("abc.def.ghi", "abc.def.ghi"),
        ("Token opaque", "opaque"),
        ("Bearer", None),
        ("", None),
        (None, None),
        ("one two three", None),
        ("justonepart", None),
    ],
)
def test_extract_credential(header, expected):
    assert extract_credential(header) == expected


def _issue(token_service, user) -> str:
    return token_service.issue(user_id=user.id, email=user.email, now=utcnow()).value.token


def test_authenticate_returns_context(user_port, token_service):
    user = user_port.add_user()
    use_case = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port)

    result = use_case.execute(authorization=f"Bearer {_issue(token_service, user)}")

    assert isinstance(result, Ok)
    assert result.value.user == user
    assert result.value.claims.user_id == user.id


def test_authenticate_accepts_bare_token(user_port, token_service):
    user = user_port.add_user()
    use_case = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port)

    result = use_case.execute(authorization=_issue(token_service, user))

    assert isinstance(result, Ok)


def test_authenticate_missing_header(user_port, token_service):
    result = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port).execute(authorization=None)

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.MISSING_CREDENTIAL
    assert result.error.message == "Missing authorization token"


def test_authenticate_without_secret_is_unavailable(user_port):
    use_case = AuthenticateRequestUseCase(token_port=JwtTokenService(jwt_secret=""), user_port=user_port)

    result = use_case.execute(authorization="Bearer abc.def.ghi")

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.SIGNING_UNAVAILABLE
    assert result.error.message == "Authentication service unavailable"


def test_authenticate_malformed_token(user_port, token_service):
    result = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port).execute(
        authorization="Bearer not-a-token"
    )

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.MALFORMED


def test_authenticate_unknown_user(user_port, token_service):
    user = user_port.add_user()
    token = _issue(token_service, user)
    user_port.users.clear()

    result = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port).execute(
        authorization=f"Bearer {token}"
    )

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.UNKNOWN_USER
    assert result.error.message == "User not found"


def test_authenticate_inactive_user(user_port, token_service):
    user = user_port.add_user(is_active=False)

    result = AuthenticateRequestUseCase(token_port=token_service, user_port=user_port).execute(
        authorization=f"Bearer {_issue(token_service, user)}"
    )

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.ACCOUNT_INACTIVE
    assert result.error.message == "Account inactive"


def test_authenticate_rechecks_expiry_after_decode(user_port):
    user = user_port.add_user()
    now = utcnow()
    stale_claims = SessionClaims(
        user_id=user.id,
        email=user.email,
        issued_at=now - timedelta(days=2),
        expires_at=now - timedelta(seconds=1),
    )
    use_case = AuthenticateRequestUseCase(token_port=FakeTokenPort(stale_claims), user_port=user_port)

    result = use_case.execute(authorization="Bearer abc.def.ghi", now=now)

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.EXPIRED
    assert result.error.message == "Token expired"
