"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace

from bson import ObjectId

from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def insert(self, user: User) -> str:
        # mirrors the unique phone index
        if any(u.phone == user.phone for u in self.store.values()):
            raise DuplicateError("User with this phone number already exists")

        user.id = str(ObjectId())
        self.store[user.id] = replace(user)
        return user.id

    # ── read operations ──────────────────────────────────────

    def get_by_phone(self, phone: str) -> User | None:
        for user in self.store.values():
            if user.phone == phone:
                return replace(user)
        return None
