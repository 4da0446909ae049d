from __future__ import annotations

from datetime import datetime, time
from uuid import uuid4

from sqlalchemy import text

from app.application.ports.user_settings_port import OnboardingPort, UserPreferencePort
from app.infrastructure.db.mappers.accounts_mapper import map_row_to_onboarding, map_row_to_user_preference


_PREFERENCE_COLUMNS = "id, user_id, notification_time, timezone, created_at, updated_at"
_ONBOARDING_COLUMNS = "id, user_id, notification_time_setting, created_at, updated_at"


class SqlUserSettingsRepository(UserPreferencePort, OnboardingPort):
    """Per-user singleton rows: one preference and one onboarding record each."""

    def __init__(self, engine):
        self._engine = engine

    def get_or_create_user_preference(self, *, user_id: str, now: datetime):
        insert_sql = """
            INSERT INTO public.user_preferences (id, user_id, created_at, updated_at)
            VALUES (:id, :user_id, :now, :now)
            ON CONFLICT (user_id) DO NOTHING
        """
        select_sql = f"""
            SELECT {_PREFERENCE_COLUMNS}
            FROM public.user_preferences
            WHERE user_id = :user_id
            LIMIT 1
        """
        with self._engine.begin() as conn:
            conn.execute(text(insert_sql), {"id": str(uuid4()), "user_id": user_id, "now": now})
            row = conn.execute(text(select_sql), {"user_id": user_id}).mappings().one()
        return map_row_to_user_preference(row)

    def update_user_preference(
        self,
        *,
        user_id: str,
        notification_time: time | None,
        timezone: str | None,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO public.user_preferences (
                id, user_id, notification_time, timezone, created_at, updated_at
            ) VALUES (
                :id, :user_id, :notification_time, :timezone, :now, :now
            )
            ON CONFLICT (user_id) DO UPDATE
            SET notification_time = EXCLUDED.notification_time,
                timezone = EXCLUDED.timezone,
                updated_at = EXCLUDED.updated_at
            RETURNING {_PREFERENCE_COLUMNS}
        """
        params = {
            "id": str(uuid4()),
            "user_id": user_id,
            "notification_time": notification_time,
            "timezone": timezone,
            "now": now,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_user_preference(row)

    def get_or_create_onboarding(self, *, user_id: str, now: datetime):
        insert_sql = """
            INSERT INTO public.onboarding (id, user_id, created_at, updated_at)
            VALUES (:id, :user_id, :now, :now)
            ON CONFLICT (user_id) DO NOTHING
        """
        select_sql = f"""
            SELECT {_ONBOARDING_COLUMNS}
            FROM public.onboarding
            WHERE user_id = :user_id
            LIMIT 1
        """
        with self._engine.begin() as conn:
            conn.execute(text(insert_sql), {"id": str(uuid4()), "user_id": user_id, "now": now})
            row = conn.execute(text(select_sql), {"user_id": user_id}).mappings().one()
        return map_row_to_onboarding(row)

    def set_onboarding_notification_time(self, *, user_id: str, now: datetime):
        sql = f"""
            INSERT INTO public.onboarding (
                id, user_id, notification_time_setting, created_at, updated_at
            ) VALUES (
                :id, :user_id, :now, :now, :now
            )
            ON CONFLICT (user_id) DO UPDATE
            SET notification_time_setting = EXCLUDED.notification_time_setting,
                updated_at = EXCLUDED.updated_at
            RETURNING {_ONBOARDING_COLUMNS}
        """
        with self._engine.begin() as conn:
            row = conn.execute(
                text(sql),
                {"id": str(uuid4()), "user_id": user_id, "now": now},
            ).mappings().one()
        return map_row_to_onboarding(row)
