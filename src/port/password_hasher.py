from typing import Protocol


class PasswordHasher(Protocol):
    """Protocol for one-way password hashing."""
    def hash(self, plaintext: str) -> str:
        """Return a salted digest of plaintext. Raises HashingError on failure."""
        ...

    def verify(self, digest: str, plaintext: str) -> bool:
        """Return True if plaintext matches digest.

        A mismatch is False; a malformed digest raises VerificationError.
        """
        ...
