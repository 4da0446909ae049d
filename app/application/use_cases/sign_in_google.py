from __future__ import annotations

import logging

from app.application.dto.auth import ResolveUserInput, SignInGoogleInput, SignInOutput
from app.application.dto.result import Err, Ok, Result
from app.application.ports.google_oauth_port import GoogleOauthPort
from app.application.ports.token_port import TokenPort
from app.domain.entities.user import GOOGLE_PROVIDER
from app.application.use_cases.auth_common import build_auth_user_output, utcnow
from app.application.use_cases.resolve_user import ResolveUserUseCase


logger = logging.getLogger(__name__)


class SignInWithGoogleUseCase:
    def __init__(
        self,
        *,
        google_oauth_port: GoogleOauthPort,
        resolve_user_use_case: ResolveUserUseCase,
        token_port: TokenPort,
    ):
        self._google_oauth_port = google_oauth_port
        self._resolve_user_use_case = resolve_user_use_case
        self._token_port = token_port

    def execute(self, command: SignInGoogleInput) -> Result[SignInOutput]:
        verified = self._google_oauth_port.verify_id_token(id_token=command.id_token)
        if isinstance(verified, Err):
            return verified
        identity = verified.value

        resolved = self._resolve_user_use_case.execute(
            ResolveUserInput(
                provider=GOOGLE_PROVIDER,
                provider_id=identity.subject,
                email=identity.email,
                name=identity.name,
                avatar_url=identity.picture,
            )
        )
        if isinstance(resolved, Err):
            return resolved
        user = resolved.value

        issued = self._token_port.issue(user_id=user.id, email=user.email, now=utcnow())
        if isinstance(issued, Err):
            return issued

        logger.info("Successful Google sign in for user: %s", user.email)
        return Ok(SignInOutput(token=issued.value.token, user=build_auth_user_output(user)))
