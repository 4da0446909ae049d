from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from app.application.ports.connection_port import ConnectionPort
from app.infrastructure.db.mappers.accounts_mapper import coerce_uuid, map_row_to_connection


_CONNECTION_COLUMNS = "id, user_id, name, phone_number, relationship, created_at, updated_at"


class SqlConnectionsRepository(ConnectionPort):
    def __init__(self, engine):
        self._engine = engine

    def list_connections(self, *, user_id: str):
        sql = f"""
            SELECT {_CONNECTION_COLUMNS}
            FROM public.connections
            WHERE user_id = :user_id
            ORDER BY name ASC, created_at ASC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"user_id": user_id}).mappings().all()
        return [map_row_to_connection(row) for row in rows]

    def get_connection(self, *, user_id: str, connection_id: str):
        connection_id = coerce_uuid(connection_id)
        if connection_id is None:
            return None
        sql = f"""
            SELECT {_CONNECTION_COLUMNS}
            FROM public.connections
            WHERE id = :connection_id
              AND user_id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(
                text(sql),
                {"connection_id": connection_id, "user_id": user_id},
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_connection(row)

    def create_connection(
        self,
        *,
        connection_id: str,
        user_id: str,
        name: str,
        phone_number: str,
        relationship: str,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO public.connections (
                id, user_id, name, phone_number, relationship, created_at, updated_at
            ) VALUES (
                :id, :user_id, :name, :phone_number, :relationship, :now, :now
            )
            RETURNING {_CONNECTION_COLUMNS}
        """
        params = {
            "id": connection_id,
            "user_id": user_id,
            "name": name,
            "phone_number": phone_number,
            "relationship": relationship,
            "now": now,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_connection(row)

    def update_connection(
        self,
        *,
        user_id: str,
        connection_id: str,
        name: str,
        phone_number: str,
        relationship: str,
        now: datetime,
    ):
        connection_id = coerce_uuid(connection_id)
        if connection_id is None:
            return None
        sql = f"""
            UPDATE public.connections
            SET name = :name,
                phone_number = :phone_number,
                relationship = :relationship,
                updated_at = :now
            WHERE id = :connection_id
              AND user_id = :user_id
            RETURNING {_CONNECTION_COLUMNS}
        """
        params = {
            "connection_id": connection_id,
            "user_id": user_id,
            "name": name,
            "phone_number": phone_number,
            "relationship": relationship,
            "now": now,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_connection(row)

    def delete_connection(self, *, user_id: str, connection_id: str) -> bool:
        connection_id = coerce_uuid(connection_id)
        if connection_id is None:
            return False
        sql = """
            DELETE FROM public.connections
            WHERE id = :connection_id
              AND user_id = :user_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"connection_id": connection_id, "user_id": user_id})
        return result.rowcount > 0
