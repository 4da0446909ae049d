from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_create_connection_use_case,
    get_current_user,
    get_delete_connection_use_case,
    get_get_connection_use_case,
    get_list_connections_use_case,
    get_update_connection_use_case,
)
from app.api.errors import ApiError, resource_input_error
from app.api.schemas.connections import (
    ConnectionDeleteResponse,
    ConnectionListResponse,
    ConnectionMutationResponse,
    ConnectionOut,
    ConnectionRequest,
    ConnectionResponse,
)
from app.application.dto.auth import AuthContext
from app.application.dto.resources import CreateConnectionInput, UpdateConnectionInput
from app.application.use_cases.manage_connections import (
    CreateConnectionUseCase,
    DeleteConnectionUseCase,
    GetConnectionUseCase,
    ListConnectionsUseCase,
    UpdateConnectionUseCase,
)
from app.domain.entities.connection import Connection
from app.domain.exceptions import ConnectionNotFoundError, ResourceValidationError


router = APIRouter()


def _to_out(connection: Connection) -> ConnectionOut:
    return ConnectionOut(
        id=connection.id,
        name=connection.name,
        phone_number=connection.phone_number,
        relationship=connection.relationship,
        created_at=connection.created_at,
        updated_at=connection.updated_at,
    )


def _not_found() -> ApiError:
    return ApiError(404, {"success": False, "error": "Connection not found"})


def _invalid(exc: ResourceValidationError) -> ApiError:
    return ApiError(422, {"success": False, "errors": exc.messages})


def _require_params(req: ConnectionRequest | None):
    if req is None or req.connection is None:
        raise resource_input_error("Missing connection parameter")
    return req.connection


@router.get("/v1/connections", response_model=ConnectionListResponse)
def list_connections(
    context: AuthContext = Depends(get_current_user),
    use_case: ListConnectionsUseCase = Depends(get_list_connections_use_case),
):
    connections = use_case.execute(user_id=context.user.id)
    return ConnectionListResponse(data=[_to_out(item) for item in connections])


@router.get("/v1/connections/{connection_id}", response_model=ConnectionResponse)
def get_connection(
    connection_id: str,
    context: AuthContext = Depends(get_current_user),
    use_case: GetConnectionUseCase = Depends(get_get_connection_use_case),
):
    try:
        connection = use_case.execute(user_id=context.user.id, connection_id=connection_id)
    except ConnectionNotFoundError as exc:
        raise _not_found() from exc
    return ConnectionResponse(data=_to_out(connection))


@router.post("/v1/connections", response_model=ConnectionMutationResponse, status_code=201)
def create_connection(
    req: ConnectionRequest | None = None,
    context: AuthContext = Depends(get_current_user),
    use_case: CreateConnectionUseCase = Depends(get_create_connection_use_case),
):
    params = _require_params(req)
    try:
        connection = use_case.execute(
            CreateConnectionInput(
                user_id=context.user.id,
                name=params.name,
                phone_number=params.phone_number,
                relationship=params.relationship,
            )
        )
    except ResourceValidationError as exc:
        raise _invalid(exc) from exc
    return ConnectionMutationResponse(data=_to_out(connection), message="Connection created successfully")


@router.api_route("/v1/connections/{connection_id}", methods=["PUT", "PATCH"], response_model=ConnectionMutationResponse)
def update_connection(
    connection_id: str,
    req: ConnectionRequest | None = None,
    context: AuthContext = Depends(get_current_user),
    use_case: UpdateConnectionUseCase = Depends(get_update_connection_use_case),
):
    params = _require_params(req)
    try:
        connection = use_case.execute(
            UpdateConnectionInput(
                user_id=context.user.id,
                connection_id=connection_id,
                changes=params.model_dump(exclude_unset=True),
            )
        )
    except ConnectionNotFoundError as exc:
        raise _not_found() from exc
    except ResourceValidationError as exc:
        raise _invalid(exc) from exc
    return ConnectionMutationResponse(data=_to_out(connection), message="Connection updated successfully")


@router.delete("/v1/connections/{connection_id}", response_model=ConnectionDeleteResponse)
def delete_connection(
    connection_id: str,
    context: AuthContext = Depends(get_current_user),
    use_case: DeleteConnectionUseCase = Depends(get_delete_connection_use_case),
):
    try:
        use_case.execute(user_id=context.user.id, connection_id=connection_id)
    except ConnectionNotFoundError as exc:
        raise _not_found() from exc
    return ConnectionDeleteResponse(message="Connection deleted successfully")
