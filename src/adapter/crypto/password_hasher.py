"""bcrypt implementation of PasswordHasher."""

from logging import getLogger

import bcrypt

from domain.model.errors import HashingError, VerificationError

logger = getLogger(__name__)

# bcrypt's own default work factor (2^10 iterations)
BCRYPT_ROUNDS = 10

# bcrypt only consumes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher:
    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        encoded = plaintext.encode('utf-8')
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise HashingError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")

        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(encoded, salt).decode('utf-8')
        except (ValueError, MemoryError) as e:
            logger.error("bcrypt failed to hash password", extra={"error": str(e)})
            raise HashingError("Failed to hash password") from e

    def verify(self, digest: str, plaintext: str) -> bool:
        encoded = plaintext.encode('utf-8')
        if len(encoded) > MAX_PASSWORD_BYTES:
            # hash() never produces a digest for such input
            return False

        try:
            return bcrypt.checkpw(encoded, digest.encode('utf-8'))
        except ValueError as e:
            raise VerificationError("Stored password digest is invalid") from e
