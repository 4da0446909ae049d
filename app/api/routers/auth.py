from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_sign_in_google_use_case
from app.api.errors import (
    MISSING_AUTH_PARAMETER,
    MISSING_ID_TOKEN,
    SIGN_IN_PATH,
    ApiError,
    auth_api_error,
    client_input_error,
    error_body,
)
from app.api.schemas.auth import AuthUserResponse, GoogleSignInRequest, SignInResponse
from app.application.dto.auth import SignInGoogleInput
from app.application.dto.result import Err
from app.application.use_cases.sign_in_google import SignInWithGoogleUseCase


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(SIGN_IN_PATH, response_model=SignInResponse)
def sign_in_with_google(
    req: GoogleSignInRequest | None = None,
    use_case: SignInWithGoogleUseCase = Depends(get_sign_in_google_use_case),
):
    if req is None or req.auth is None:
        raise client_input_error(MISSING_AUTH_PARAMETER)
    id_token = req.auth.id_token
    if id_token is None or not id_token.strip():
        raise client_input_error(MISSING_ID_TOKEN)

    try:
        result = use_case.execute(SignInGoogleInput(id_token=id_token))
    except Exception:
        logger.exception("Unexpected error during Google sign in")
        raise ApiError(500, error_body("Authentication failed"))

    if isinstance(result, Err):
        raise auth_api_error(result.error)

    output = result.value
    return SignInResponse(
        token=output.token,
        user=AuthUserResponse(
            id=output.user.id,
            email=output.user.email,
            name=output.user.name,
            avatar_url=output.user.avatar_url,
        ),
    )
