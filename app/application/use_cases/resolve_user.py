from __future__ import annotations

import logging
from uuid import uuid4

from app.application.dto.auth import ResolveUserInput
from app.application.dto.result import Ok, Result, fail
from app.application.ports.user_port import UserPort
from app.domain.entities.auth_error import AuthErrorKind
from app.domain.entities.user import User
from app.domain.exceptions import DuplicateIdentityError
from app.domain.services.validation import validate_user_fields
from app.application.use_cases.auth_common import utcnow


logger = logging.getLogger(__name__)


class ResolveUserUseCase:
    """Find-or-create the local user for an external identity.

    The identity provider is authoritative for email, name and avatar, so
    those fields are rewritten on every successful sign-in, not only on
    creation.
    """

    def __init__(self, *, user_port: UserPort):
        self._user_port = user_port

    def execute(self, command: ResolveUserInput) -> Result[User]:
        errors = validate_user_fields(
            email=command.email,
            name=command.name,
            provider=command.provider,
            provider_id=command.provider_id,
        )
        if errors:
            logger.error("User creation/update failed: %s", ", ".join(errors))
            return fail(AuthErrorKind.VALIDATION_FAILED, "User validation failed", errors)

        email = command.email
        name = command.name
        avatar_url = command.avatar_url or None

        try:
            user = self._user_port.upsert_user_by_identity(
                user_id=str(uuid4()),
                provider=command.provider,
                provider_id=command.provider_id,
                email=email,
                name=name,
                avatar_url=avatar_url,
                now=utcnow(),
            )
        except DuplicateIdentityError as exc:
            # a concurrent sign-in may have committed this identity first
            existing = self._user_port.get_user_by_identity(
                provider=command.provider,
                provider_id=command.provider_id,
            )
            if existing is not None and existing.email == email:
                return Ok(existing)
            logger.error("Database constraint violation: %s", exc)
            return fail(AuthErrorKind.DUPLICATE_IDENTITY, "User creation failed due to duplicate data")

        return Ok(user)
