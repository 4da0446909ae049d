from __future__ import annotations

from uuid import uuid4

from app.application.dto.resources import CreateConnectionInput, UpdateConnectionInput
from app.application.ports.connection_port import ConnectionPort
from app.domain.entities.connection import DEFAULT_RELATIONSHIP, Connection
from app.domain.exceptions import ConnectionNotFoundError, ResourceValidationError
from app.domain.services.validation import validate_connection_fields
from app.application.use_cases.auth_common import utcnow


CONNECTION_FIELDS = ("name", "phone_number", "relationship")


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


class ListConnectionsUseCase:
    def __init__(self, *, connection_port: ConnectionPort):
        self._connection_port = connection_port

    def execute(self, *, user_id: str) -> list[Connection]:
        return self._connection_port.list_connections(user_id=user_id)


class GetConnectionUseCase:
    def __init__(self, *, connection_port: ConnectionPort):
        self._connection_port = connection_port

    def execute(self, *, user_id: str, connection_id: str) -> Connection:
        connection = self._connection_port.get_connection(user_id=user_id, connection_id=connection_id)
        if connection is None:
            raise ConnectionNotFoundError(connection_id)
        return connection


class CreateConnectionUseCase:
    def __init__(self, *, connection_port: ConnectionPort):
        self._connection_port = connection_port

    def execute(self, command: CreateConnectionInput) -> Connection:
        name = _strip(command.name)
        phone_number = _strip(command.phone_number)
        relationship = command.relationship if command.relationship is not None else DEFAULT_RELATIONSHIP

        errors = validate_connection_fields(name=name, phone_number=phone_number, relationship=relationship)
        if errors:
            raise ResourceValidationError(errors)

        return self._connection_port.create_connection(
            connection_id=str(uuid4()),
            user_id=command.user_id,
            name=name,
            phone_number=phone_number,
            relationship=relationship,
            now=utcnow(),
        )


class UpdateConnectionUseCase:
    """Apply a partial update; fields absent from ``changes`` keep their value."""

    def __init__(self, *, connection_port: ConnectionPort):
        self._connection_port = connection_port

    def execute(self, command: UpdateConnectionInput) -> Connection:
        current = self._connection_port.get_connection(
            user_id=command.user_id,
            connection_id=command.connection_id,
        )
        if current is None:
            raise ConnectionNotFoundError(command.connection_id)

        merged = {field: getattr(current, field) for field in CONNECTION_FIELDS}
        for field in CONNECTION_FIELDS:
            if field in command.changes:
                merged[field] = _strip(command.changes[field])

        errors = validate_connection_fields(**merged)
        if errors:
            raise ResourceValidationError(errors)

        updated = self._connection_port.update_connection(
            user_id=command.user_id,
            connection_id=command.connection_id,
            now=utcnow(),
            **merged,
        )
        if updated is None:
            raise ConnectionNotFoundError(command.connection_id)
        return updated


class DeleteConnectionUseCase:
    def __init__(self, *, connection_port: ConnectionPort):
        self._connection_port = connection_port

    def execute(self, *, user_id: str, connection_id: str) -> None:
        deleted = self._connection_port.delete_connection(user_id=user_id, connection_id=connection_id)
        if not deleted:
            raise ConnectionNotFoundError(connection_id)
