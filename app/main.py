from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.api.errors import (
    ApiError,
    api_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from app.api.middleware import install_security_headers
from app.api.routers.auth import router as auth_router
from app.api.routers.connections import router as connections_router
from app.api.routers.health import router as health_router
from app.api.routers.user_settings import router as user_settings_router
from app.core.logging import configure_logging
from app.shared.config import Settings, get_settings


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    missing = settings.missing_auth_settings()
    if missing:
        logger.error("Missing authentication settings: %s", ", ".join(missing))

    app = FastAPI(title="Sign-in API")

    install_security_headers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )
    if settings.force_https:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(auth_router, prefix="/api")
    app.include_router(connections_router, prefix="/api")
    app.include_router(user_settings_router, prefix="/api")
    return app


app = create_app()
