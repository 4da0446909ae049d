from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.entities.auth_error import AuthError, AuthErrorKind, ErrorCategory


logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/v1/auth/google"
MISSING_AUTH_PARAMETER = "Missing auth parameter"
MISSING_ID_TOKEN = "Missing ID token"
INVALID_REQUEST_PARAMETERS = "Invalid request parameters"

CATEGORY_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.CLIENT_INPUT: 400,
    ErrorCategory.UNAUTHENTICATED: 401,
    ErrorCategory.CONFLICT: 409,
    ErrorCategory.VALIDATION_FAILED: 422,
    ErrorCategory.SERVICE_UNAVAILABLE: 500,
    ErrorCategory.UNEXPECTED: 500,
}


class ApiError(Exception):
    """Error with a ready-made JSON body, rendered by ``api_error_handler``."""

    def __init__(self, status_code: int, content: dict[str, Any]):
        super().__init__(content)
        self.status_code = status_code
        self.content = content


def error_body(message: str, details: list[str] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return body


def auth_api_error(error: AuthError) -> ApiError:
    return ApiError(CATEGORY_STATUS[error.category], error_body(error.message, error.details))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.content)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def client_input_error(message: str) -> ApiError:
    return auth_api_error(AuthError(kind=AuthErrorKind.MISSING_PARAMETER, message=message))


def resource_input_error(message: str) -> ApiError:
    return ApiError(CATEGORY_STATUS[ErrorCategory.CLIENT_INPUT], {"success": False, "error": message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # only the locations are logged; the rejected input stays out of logs and responses
    locations = [tuple(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    logger.warning("Malformed request body on %s %s: %s", request.method, request.url.path, locations)

    if request.url.path.endswith(SIGN_IN_PATH):
        if any("id_token" in location for location in locations):
            error = client_input_error(MISSING_ID_TOKEN)
        else:
            error = client_input_error(MISSING_AUTH_PARAMETER)
    else:
        error = resource_input_error(INVALID_REQUEST_PARAMETERS)
    return JSONResponse(status_code=error.status_code, content=error.content)
