from dataclasses import dataclass

DEFAULT_ROLE = 'user'


@dataclass
class User:
    """Domain model representing a registered user.

    ``id`` is None until the user store assigns one on insert.
    """
    phone: str
    password_hash: str
    id: str | None = None
    first_name: str = ''
    last_name: str = ''
    avatar_logo: str | None = None
    amount: float = 0.0
    balance: float = 0.0
    point: int = 0
    role: str = DEFAULT_ROLE

    @classmethod
    def new(cls, phone: str, password_hash: str) -> 'User':
        """Build a not-yet-persisted user with every profile field at its default."""
        return cls(phone=phone, password_hash=password_hash)
