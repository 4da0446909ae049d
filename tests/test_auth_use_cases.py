from __future__ import annotations

import jwt

from app.application.dto.auth import GoogleIdentityInfo, ResolveUserInput, SignInGoogleInput
from app.application.dto.result import Err, Ok, fail
from app.application.use_cases.resolve_user import ResolveUserUseCase
from app.application.use_cases.sign_in_google import SignInWithGoogleUseCase
from app.application.use_cases.auth_common import utcnow
from app.domain.entities.auth_error import AuthErrorKind
from app.domain.exceptions import DuplicateIdentityError
from app.infrastructure.clients import google_oidc_client
from app.infrastructure.clients.google_oidc_client import GoogleOidcClient
from app.infrastructure.security.token_service import JwtTokenService


class FakeGoogleOauthPort:
    def __init__(self, result):
        self.result = result
        self.calls: list[str] = []

    def verify_id_token(self, *, id_token: str):
        self.calls.append(id_token)
        return self.result


def _identity(**overrides) -> GoogleIdentityInfo:
    fields = {
        "subject": "12345",
        "email": "alice@example.com",
        "email_verified": True,
        "name": "Alice",
        "picture": "https://example.com/a.png",
    }
    fields.update(overrides)
    return GoogleIdentityInfo(**fields)


def _sign_in_use_case(google_result, user_port, token_service) -> SignInWithGoogleUseCase:
    return SignInWithGoogleUseCase(
        google_oauth_port=FakeGoogleOauthPort(google_result),
        resolve_user_use_case=ResolveUserUseCase(user_port=user_port),
        token_port=token_service,
    )


def test_first_sign_in_creates_user_and_issues_token(user_port, token_service):
    use_case = _sign_in_use_case(Ok(_identity()), user_port, token_service)

    result = use_case.execute(SignInGoogleInput(id_token="google-token"))

    assert isinstance(result, Ok)
    assert len(user_port.users) == 1
    user = next(iter(user_port.users.values()))
    assert user.provider == "google"
    assert user.provider_id == "12345"
    assert result.value.user.id == user.id
    assert result.value.user.avatar_url == "https://example.com/a.png"
    payload = jwt.decode(result.value.token, options={"verify_signature": False})
    assert payload["user_id"] == user.id
    assert payload["email"] == "alice@example.com"


def test_repeat_sign_in_updates_same_user(user_port, token_service):
    first = _sign_in_use_case(Ok(_identity()), user_port, token_service).execute(SignInGoogleInput(id_token="t1"))
    second = _sign_in_use_case(
        Ok(_identity(name="B", picture=None)),
        user_port,
        token_service,
    ).execute(SignInGoogleInput(id_token="t2"))

    assert isinstance(first, Ok)
    assert isinstance(second, Ok)
    assert len(user_port.users) == 1
    assert second.value.user.id == first.value.user.id
    user = user_port.users[first.value.user.id]
    assert user.name == "B"
    assert user.avatar_url is None


def test_verifier_rejection_does_not_touch_users(user_port, token_service):
    for kind, message in (
        (AuthErrorKind.EMAIL_UNVERIFIED, "Email not verified with Google"),
        (AuthErrorKind.INCOMPLETE_PAYLOAD, "Invalid token payload"),
        (AuthErrorKind.ASSERTION_INVALID, "Invalid or expired token"),
    ):
        use_case = _sign_in_use_case(fail(kind, message), user_port, token_service)

        result = use_case.execute(SignInGoogleInput(id_token="t"))

        assert isinstance(result, Err)
        assert result.kind == kind
    assert user_port.users == {}
    assert user_port.upsert_calls == 0


def test_sign_in_fails_when_signing_not_configured(user_port):
    use_case = _sign_in_use_case(Ok(_identity()), user_port, JwtTokenService(jwt_secret=""))

    result = use_case.execute(SignInGoogleInput(id_token="t"))

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.SIGNING_UNAVAILABLE
    assert result.error.message == "Token generation failed"


def test_resolve_user_keeps_asserted_email(user_port):
    result = ResolveUserUseCase(user_port=user_port).execute(
        ResolveUserInput(
            provider="google",
            provider_id="abc",
            email="Alice@Example.COM",
            name="Alice Liddell",
            avatar_url="",
        )
    )

    assert isinstance(result, Ok)
    assert result.value.email == "Alice@Example.COM"
    assert result.value.name == "Alice Liddell"
    assert result.value.avatar_url is None
    assert user_port.upsert_calls == 1
    assert user_port.get_user_by_identity(provider="google", provider_id="abc").email == "Alice@Example.COM"


def test_resolve_user_reports_validation_details(user_port):
    result = ResolveUserUseCase(user_port=user_port).execute(
        ResolveUserInput(provider="google", provider_id="", email="not-an-email", name="", avatar_url=None)
    )

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.VALIDATION_FAILED
    assert result.error.message == "User validation failed"
    assert result.error.details == ["Email is invalid", "Name can't be blank", "Provider id can't be blank"]
    assert user_port.upsert_calls == 0


def test_resolve_user_conflicting_email_is_duplicate(user_port):
    user_port.add_user(email="taken@example.com", provider_id="other-subject")

    result = ResolveUserUseCase(user_port=user_port).execute(
        ResolveUserInput(
            provider="google",
            provider_id="new-subject",
            email="taken@example.com",
            name="Bob",
            avatar_url=None,
        )
    )

    assert isinstance(result, Err)
    assert result.kind == AuthErrorKind.DUPLICATE_IDENTITY
    assert result.error.message == "User creation failed due to duplicate data"
    assert len(user_port.users) == 1


def test_resolve_user_returns_racer_with_same_identity(user_port):
    existing = user_port.add_user(email="alice@example.com", provider_id="12345")

    def racing_upsert(**kwargs):
        raise DuplicateIdentityError("unique violation")

    user_port.upsert_user_by_identity = racing_upsert

    result = ResolveUserUseCase(user_port=user_port).execute(
        ResolveUserInput(
            provider="google",
            provider_id="12345",
            email="alice@example.com",
            name="Alice",
            avatar_url=None,
        )
    )

    assert isinstance(result, Ok)
    assert result.value.id == existing.id


def test_google_scenario_end_to_end(monkeypatch, user_port, token_service):
    names = iter(["A", "B"])
    audiences = []

    def fake_verify(*, token, audience, timeout_seconds):
        audiences.append(audience)
        return {
            "sub": "12345",
            "email": "a@b.com",
            "name": next(names),
            "picture": "http://x/y.png",
            "email_verified": True,
        }

    monkeypatch.setattr(google_oidc_client, "id_token_verify", fake_verify)
    use_case = SignInWithGoogleUseCase(
        google_oauth_port=GoogleOidcClient(client_id="cid"),
        resolve_user_use_case=ResolveUserUseCase(user_port=user_port),
        token_port=token_service,
    )

    first = use_case.execute(SignInGoogleInput(id_token="assertion-1"))
    second = use_case.execute(SignInGoogleInput(id_token="assertion-2"))

    assert audiences == ["cid", "cid"]
    assert isinstance(first, Ok) and isinstance(second, Ok)
    assert len(user_port.users) == 1
    user = user_port.users[first.value.user.id]
    assert (user.provider, user.provider_id, user.name) == ("google", "12345", "B")
    assert second.value.user.id == first.value.user.id

    now = utcnow()
    claims = token_service.decode(token=second.value.token, now=now)
    assert isinstance(claims, Ok)
    assert claims.value.user_id == user.id
    assert claims.value.email == "a@b.com"
    assert claims.value.issued_at <= now < claims.value.expires_at
