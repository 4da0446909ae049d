"""Shared fakes for the port protocols."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, time
from uuid import uuid4

import pytest

from app.application.use_cases.auth_common import utcnow
from app.domain.entities.connection import Connection
from app.domain.entities.user import User
from app.domain.entities.user_settings import Onboarding, UserPreference
from app.domain.exceptions import DuplicateIdentityError
from app.infrastructure.security.token_service import JwtTokenService


TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeUserPort:
    def __init__(self):
        self.users: dict[str, User] = {}
        self.upsert_calls = 0

    def add_user(self, **overrides) -> User:
        now = utcnow()
        fields = {
            "id": str(uuid4()),
            "email": "alice@example.com",
            "name": "Alice",
            "avatar_url": None,
            "provider": "google",
            "provider_id": "google-alice",
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        user = User(**fields)
        self.users[user.id] = user
        return user

    def get_user_by_id(self, *, user_id: str) -> User | None:
        return self.users.get(user_id)

    def get_user_by_identity(self, *, provider: str, provider_id: str) -> User | None:
        for user in self.users.values():
            if user.provider == provider and user.provider_id == provider_id:
                return user
        return None

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
    ) -> User:
        self.upsert_calls += 1
        existing = self.get_user_by_identity(provider=provider, provider_id=provider_id)
        for user in self.users.values():
            if user.email == email and (existing is None or user.id != existing.id):
                raise DuplicateIdentityError(f"email {email} already taken")
        if existing is not None:
            updated = replace(existing, email=email, name=name, avatar_url=avatar_url, updated_at=now)
            self.users[updated.id] = updated
            return updated
        user = User(
            id=user_id,
            email=email,
            name=name,
            avatar_url=avatar_url,
            provider=provider,
            provider_id=provider_id,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user


class FakeConnectionPort:
    def __init__(self):
        self.connections: dict[str, Connection] = {}

    def list_connections(self, *, user_id: str) -> list[Connection]:
        owned = [item for item in self.connections.values() if item.user_id == user_id]
        return sorted(owned, key=lambda item: item.name)

    def get_connection(self, *, user_id: str, connection_id: str) -> Connection | None:
        connection = self.connections.get(connection_id)
        if connection is None or connection.user_id != user_id:
            return None
        return connection

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
        connection = Connection(
            id=connection_id,
            user_id=user_id,
            name=name,
            phone_number=phone_number,
            relationship=relationship,
            created_at=now,
            updated_at=now,
        )
        self.connections[connection.id] = connection
        return connection

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
        current = self.get_connection(user_id=user_id, connection_id=connection_id)
        if current is None:
            return None
        updated = replace(current, name=name, phone_number=phone_number, relationship=relationship, updated_at=now)
        self.connections[connection_id] = updated
        return updated

    def delete_connection(self, *, user_id: str, connection_id: str) -> bool:
        if self.get_connection(user_id=user_id, connection_id=connection_id) is None:
            return False
        del self.connections[connection_id]
        return True


class FakeUserSettingsPort:
    def __init__(self):
        self.preferences: dict[str, UserPreference] = {}
        self.onboardings: dict[str, Onboarding] = {}

    def get_or_create_user_preference(self, *, user_id: str, now: datetime) -> UserPreference:
        if user_id not in self.preferences:
            self.preferences[user_id] = UserPreference(
                id=str(uuid4()),
                user_id=user_id,
                notification_time=None,
                timezone=None,
                created_at=now,
                updated_at=now,
            )
        return self.preferences[user_id]

    def update_user_preference(
        self,
        *,
        user_id: str,
        notification_time: time | None,
        timezone: str | None,
        now: datetime,
    ) -> UserPreference:
        current = self.get_or_create_user_preference(user_id=user_id, now=now)
        updated = replace(current, notification_time=notification_time, timezone=timezone, updated_at=now)
        self.preferences[user_id] = updated
        return updated

    def get_or_create_onboarding(self, *, user_id: str, now: datetime) -> Onboarding:
        if user_id not in self.onboardings:
            self.onboardings[user_id] = Onboarding(
                id=str(uuid4()),
                user_id=user_id,
                notification_time_setting=None,
                created_at=now,
                updated_at=now,
            )
        return self.onboardings[user_id]

    def set_onboarding_notification_time(self, *, user_id: str, now: datetime) -> Onboarding:
        current = self.get_or_create_onboarding(user_id=user_id, now=now)
        updated = replace(current, notification_time_setting=now, updated_at=now)
        self.onboardings[user_id] = updated
        return updated


@pytest.fixture
def user_port() -> FakeUserPort:
    return FakeUserPort()


@pytest.fixture
def connection_port() -> FakeConnectionPort:
    return FakeConnectionPort()


@pytest.fixture
def user_settings_port() -> FakeUserSettingsPort:
    return FakeUserSettingsPort()


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(jwt_secret=TEST_JWT_SECRET)
