from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, Header

from app.api.errors import ApiError, auth_api_error
from app.application.dto.auth import AuthContext
from app.application.dto.result import Err
from app.application.use_cases.authenticate_request import AuthenticateRequestUseCase
from app.application.use_cases.manage_connections import (
    CreateConnectionUseCase,
    DeleteConnectionUseCase,
    GetConnectionUseCase,
    ListConnectionsUseCase,
    UpdateConnectionUseCase,
)
from app.application.use_cases.resolve_user import ResolveUserUseCase
from app.application.use_cases.sign_in_google import SignInWithGoogleUseCase
from app.application.use_cases.user_settings import (
    GetOnboardingUseCase,
    GetUserPreferenceUseCase,
    UpdateUserPreferenceUseCase,
)
from app.infrastructure.clients.google_oidc_client import GoogleOidcClient
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.accounts_repository import SqlUsersRepository
from app.infrastructure.db.repositories.connections_repository import SqlConnectionsRepository
from app.infrastructure.db.repositories.user_settings_repository import SqlUserSettingsRepository
from app.infrastructure.security.token_service import JwtTokenService
from app.shared.config import get_settings


logger = logging.getLogger(__name__)


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        logger.error("POSTGRES_DSN is required.")
        raise ApiError(500, {"error": "Internal server error"})
    return get_engine(settings.postgres_dsn)


def _get_users_repository() -> SqlUsersRepository:
    return SqlUsersRepository(_get_db_engine())


def _get_connections_repository() -> SqlConnectionsRepository:
    return SqlConnectionsRepository(_get_db_engine())


def _get_user_settings_repository() -> SqlUserSettingsRepository:
    return SqlUserSettingsRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_days=settings.jwt_ttl_days,
    )


@lru_cache(maxsize=1)
def _get_google_oauth_client() -> GoogleOidcClient:
    settings = get_settings()
    return GoogleOidcClient(
        client_id=settings.google_client_id,
        timeout_seconds=settings.google_verify_timeout_seconds,
    )


def get_sign_in_google_use_case() -> SignInWithGoogleUseCase:
    return SignInWithGoogleUseCase(
        google_oauth_port=_get_google_oauth_client(),
        resolve_user_use_case=ResolveUserUseCase(user_port=_get_users_repository()),
        token_port=_get_token_service(),
    )


def get_authenticate_request_use_case() -> AuthenticateRequestUseCase:
    return AuthenticateRequestUseCase(
        token_port=_get_token_service(),
        user_port=_get_users_repository(),
    )


def get_list_connections_use_case() -> ListConnectionsUseCase:
    return ListConnectionsUseCase(connection_port=_get_connections_repository())


def get_get_connection_use_case() -> GetConnectionUseCase:
    return GetConnectionUseCase(connection_port=_get_connections_repository())


def get_create_connection_use_case() -> CreateConnectionUseCase:
    return CreateConnectionUseCase(connection_port=_get_connections_repository())


def get_update_connection_use_case() -> UpdateConnectionUseCase:
    return UpdateConnectionUseCase(connection_port=_get_connections_repository())


def get_delete_connection_use_case() -> DeleteConnectionUseCase:
    return DeleteConnectionUseCase(connection_port=_get_connections_repository())


def get_get_user_preference_use_case() -> GetUserPreferenceUseCase:
    return GetUserPreferenceUseCase(user_preference_port=_get_user_settings_repository())


def get_update_user_preference_use_case() -> UpdateUserPreferenceUseCase:
    repository = _get_user_settings_repository()
    return UpdateUserPreferenceUseCase(user_preference_port=repository, onboarding_port=repository)


def get_get_onboarding_use_case() -> GetOnboardingUseCase:
    return GetOnboardingUseCase(onboarding_port=_get_user_settings_repository())


def get_current_user(
    authorization: str | None = Header(default=None),
    use_case: AuthenticateRequestUseCase = Depends(get_authenticate_request_use_case),
) -> AuthContext:
    result = use_case.execute(authorization=authorization)
    if isinstance(result, Err):
        raise auth_api_error(result.error)
    return result.value
