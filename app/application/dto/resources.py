from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class CreateConnectionInput:
    user_id: str
    name: str | None
    phone_number: str | None
    relationship: str | None


@dataclass(frozen=True)
class UpdateConnectionInput:
    user_id: str
    connection_id: str
    changes: dict[str, str | None]


@dataclass(frozen=True)
class UpdateUserPreferenceInput:
    user_id: str
    changes: dict[str, time | str | None]
