from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class DuplicateIdentityError(DomainError):
    """A unique key (email or provider identity) is already taken."""


class ConnectionNotFoundError(DomainError):
    """Connection does not exist or belongs to another user."""


class ResourceValidationError(DomainError):
    """Entity failed field validation."""

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages
