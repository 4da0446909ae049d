from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


Relationship = Literal[
    "friend",
    "family",
    "colleague",
    "partner",
    "parent",
    "child",
    "sibling",
    "romantic_interest",
]

RELATIONSHIPS: tuple[str, ...] = (
    "friend",
    "family",
    "colleague",
    "partner",
    "parent",
    "child",
    "sibling",
    "romantic_interest",
)

DEFAULT_RELATIONSHIP: Relationship = "friend"


@dataclass(frozen=True)
class Connection:
    id: str
    user_id: str
    name: str
    phone_number: str
    relationship: Relationship
    created_at: datetime
    updated_at: datetime
