"""Credential store abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from models.user import User, UserRecord


class AbstractUserStore(ABC):
    """Interface for user persistence backends."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the stored user, digest included, for credential checks."""

    @abstractmethod
    def get_record_by_email(self, email: str) -> UserRecord | None:
        """Return the user without its password digest, or None."""

    @abstractmethod
    def create(self, *, username: str, email: str, phone: str, password_hash: str) -> UserRecord:
        """Persist a new user and return its record.

        Raises ``DuplicateResourceError`` when the email is already taken.
        """

    @abstractmethod
    def list_records(self) -> list[UserRecord]:
        """Return every user without password digests."""
