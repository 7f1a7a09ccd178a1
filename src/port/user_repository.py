from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def get_by_phone(self, phone: str) -> User | None:
        """Find a user by exact phone match. Return User or None if not found.

        Raises StoreError if the lookup itself fails.
        """
        ...

    def insert(self, user: User) -> str:
        """Persist a new user and return its generated ID.

        Raises DuplicateError if the phone is already taken, StoreError on other failures.
        """
        ...
