"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

from domain.model.errors import AuthenticationError, DuplicateError
from domain.model.user import User
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository

USER_EXISTS_MESSAGE = "User with this phone number already exists"
USER_NOT_FOUND_MESSAGE = "User not found"
INVALID_PASSWORD_MESSAGE = "Invalid password"


def register(repo: UserRepository, hasher: PasswordHasher, phone: str, password: str) -> str:
    """Register a new user and return its ID.

    The existence check is a fast path only; the store's unique phone
    constraint still rejects a concurrent duplicate at insert time.

    Raises:
        DuplicateError: phone already registered
        HashingError: password could not be hashed
        StoreError: lookup or insert failed
    """
    if repo.get_by_phone(phone) is not None:
        raise DuplicateError(USER_EXISTS_MESSAGE)

    user = User.new(phone=phone, password_hash=hasher.hash(password))
    return repo.insert(user)


def authenticate(repo: UserRepository, hasher: PasswordHasher, phone: str, password: str) -> User:
    """Check a phone/password pair and return the matching user.

    Raises:
        AuthenticationError: unknown phone or wrong password
        VerificationError: stored digest is malformed
        StoreError: lookup failed
    """
    user = repo.get_by_phone(phone)
    if user is None:
        raise AuthenticationError(USER_NOT_FOUND_MESSAGE)

    if not hasher.verify(user.password_hash, password):
        raise AuthenticationError(INVALID_PASSWORD_MESSAGE)

    return user
