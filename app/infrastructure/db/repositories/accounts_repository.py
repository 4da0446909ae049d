from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.application.ports.user_port import UserPort
from app.domain.exceptions import DuplicateIdentityError
from app.infrastructure.db.mappers.accounts_mapper import coerce_uuid, map_row_to_user


logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, email, name, avatar_url, provider, provider_id, is_active, created_at, updated_at"


class SqlUsersRepository(UserPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_id(self, *, user_id: str):
        user_id = coerce_uuid(user_id)
        if user_id is None:
            return None
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM public.users
            WHERE id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_identity(self, *, provider: str, provider_id: str):
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM public.users
            WHERE provider = :provider
              AND provider_id = :provider_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(
                text(sql),
                {"provider": provider, "provider_id": provider_id},
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def upsert_user_by_identity(
        self,
        *,
        user_id: str,
        provider: str,
        provider_id: str,
        email: str,
        name: str,
        avatar_url: str | None,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO public.users (
                id, email, name, avatar_url, provider, provider_id, is_active, created_at, updated_at
            ) VALUES (
                :id, :email, :name, :avatar_url, :provider, :provider_id, true, :now, :now
            )
            ON CONFLICT (provider, provider_id) DO UPDATE
            SET email = EXCLUDED.email,
                name = EXCLUDED.name,
                avatar_url = EXCLUDED.avatar_url,
                updated_at = EXCLUDED.updated_at
            RETURNING {_USER_COLUMNS}
        """
        params = {
            "id": user_id,
            "email": email,
            "name": name,
            "avatar_url": avatar_url,
            "provider": provider,
            "provider_id": provider_id,
            "now": now,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(text(sql), params).mappings().one()
        except IntegrityError as exc:
            logger.warning("User upsert for %s/%s hit a unique constraint.", provider, provider_id)
            raise DuplicateIdentityError(str(exc.orig)) from exc
        return map_row_to_user(row)
