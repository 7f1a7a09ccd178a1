"""Domain-level exceptions.

Services and adapters raise these errors to express failures.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class AuthenticationError(DomainError):
    """Credentials were rejected (unknown user or wrong password)."""


class HashingError(DomainError):
    """Password could not be turned into a digest."""


class VerificationError(DomainError):
    """Stored digest is structurally invalid and cannot be checked."""


class StoreError(DomainError):
    """User store failed to read or write."""
