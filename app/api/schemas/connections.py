from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ConnectionParams(BaseModel):
    name: str | None = None
    phone_number: str | None = None
    relationship: str | None = None


class ConnectionRequest(BaseModel):
    connection: ConnectionParams | None = None


class ConnectionOut(BaseModel):
    id: str
    name: str
    phone_number: str
    relationship: str
    created_at: datetime
    updated_at: datetime


class ConnectionListResponse(BaseModel):
    success: bool = True
    data: list[ConnectionOut]


class ConnectionResponse(BaseModel):
    success: bool = True
    data: ConnectionOut


class ConnectionMutationResponse(BaseModel):
    success: bool = True
    data: ConnectionOut
    message: str


class ConnectionDeleteResponse(BaseModel):
    success: bool = True
    message: str
