"""Unit tests for auth_service module."""

import unittest
from unittest.mock import MagicMock
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from services.auth_service import (
    register,
    authenticate,
    USER_EXISTS_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    INVALID_PASSWORD_MESSAGE,
)
from adapter.crypto.password_hasher import BcryptPasswordHasher
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import (
    AuthenticationError,
    DuplicateError,
    HashingError,
    StoreError,
)


class TestRegister(unittest.TestCase):
    """Test register function."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.hasher = BcryptPasswordHasher(rounds=4)

    def test_register_returns_id(self):
        user_id = register(self.repo, self.hasher, '555-0100', 'correct-horse')

        self.assertTrue(user_id)
        self.assertIn(user_id, self.repo.store)

    def test_register_stores_digest_not_plaintext(self):
        register(self.repo, self.hasher, '555-0100', 'correct-horse')

        user = self.repo.get_by_phone('555-0100')
        self.assertNotEqual(user.password_hash, 'correct-horse')
        self.assertTrue(self.hasher.verify(user.password_hash, 'correct-horse'))

    def test_new_user_has_defaults(self):
        register(self.repo, self.hasher, '555-0100', 'correct-horse')

        user = self.repo.get_by_phone('555-0100')
        self.assertEqual(user.amount, 0.0)
        self.assertEqual(user.balance, 0.0)
        self.assertEqual(user.point, 0)
        self.assertEqual(user.role, 'user')
        self.assertEqual(user.first_name, '')
        self.assertEqual(user.last_name, '')
        self.assertIsNone(user.avatar_logo)

    def test_duplicate_phone(self):
        register(self.repo, self.hasher, '555-0100', 'correct-horse')

        with self.assertRaises(DuplicateError) as ctx:
            register(self.repo, self.hasher, '555-0100', 'other-password')
        self.assertEqual(str(ctx.exception), USER_EXISTS_MESSAGE)
        self.assertEqual(len(self.repo.store), 1)

    def test_duplicate_check_skips_hashing(self):
        register(self.repo, self.hasher, '555-0100', 'correct-horse')
        hasher = MagicMock()

        with self.assertRaises(DuplicateError):
            register(self.repo, hasher, '555-0100', 'correct-horse')
        hasher.hash.assert_not_called()

    def test_insert_conflict_after_check(self):
        """A duplicate that slips past the lookup is still rejected by the store."""
        repo = MagicMock()
        repo.get_by_phone.return_value = None
        repo.insert.side_effect = DuplicateError(USER_EXISTS_MESSAGE)

        with self.assertRaises(DuplicateError):
            register(repo, self.hasher, '555-0100', 'correct-horse')

    def test_hashing_error_propagates(self):
        hasher = MagicMock()
        hasher.hash.side_effect = HashingError("too long")

        with self.assertRaises(HashingError):
            register(self.repo, hasher, '555-0100', 'correct-horse')
        self.assertEqual(self.repo.store, {})

    def test_store_error_propagates(self):
        repo = MagicMock()
        repo.get_by_phone.return_value = None
        repo.insert.side_effect = StoreError("Failed to save user")

        with self.assertRaises(StoreError):
            register(repo, self.hasher, '555-0100', 'correct-horse')


class TestAuthenticate(unittest.TestCase):
    """Test authenticate function."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.hasher = BcryptPasswordHasher(rounds=4)
        self.user_id = register(self.repo, self.hasher, '555-0100', 'correct-horse')

    def test_correct_credentials(self):
        user = authenticate(self.repo, self.hasher, '555-0100', 'correct-horse')
        self.assertEqual(user.id, self.user_id)

    def test_wrong_password(self):
        with self.assertRaises(AuthenticationError) as ctx:
            authenticate(self.repo, self.hasher, '555-0100', 'wrong')
        self.assertEqual(str(ctx.exception), INVALID_PASSWORD_MESSAGE)

    def test_unknown_phone(self):
        with self.assertRaises(AuthenticationError) as ctx:
            authenticate(self.repo, self.hasher, '555-0199', 'correct-horse')
        self.assertEqual(str(ctx.exception), USER_NOT_FOUND_MESSAGE)

    def test_phone_is_not_normalised(self):
        with self.assertRaises(AuthenticationError):
            authenticate(self.repo, self.hasher, '5550100', 'correct-horse')

    def test_store_error_propagates(self):
        repo = MagicMock()
        repo.get_by_phone.side_effect = StoreError("Failed to look up user")

        with self.assertRaises(StoreError):
            authenticate(repo, self.hasher, '555-0100', 'correct-horse')


if __name__ == '__main__':
    unittest.main()
