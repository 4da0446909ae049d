from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.connection import Connection


class ConnectionPort(Protocol):
    def list_connections(self, *, user_id: str) -> list[Connection]:
        ...

    def get_connection(self, *, user_id: str, connection_id: str) -> Connection | None:
        ...

    def create_connection(
        self,
        *,
        connection_id: str,
        user_id: str,
        name: str,
        phone_number: str,
        relationship: str,
        now: datetime,
    ) -> Connection:
        ...

    def update_connection(
        self,
        *,
        user_id: str,
        connection_id: str,
        name: str,
        phone_number: str,
        relationship: str,
        now: datetime,
    ) -> Connection | None:
        ...

    def delete_connection(self, *, user_id: str, connection_id: str) -> bool:
        ...
