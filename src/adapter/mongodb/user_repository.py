"""MongoDB implementation of UserRepository."""

from logging import getLogger

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError, StoreError
from domain.model.user import User

logger = getLogger(__name__)

PHONE_INDEX_NAME = 'idx_users_phone'


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create the unique phone index on the users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            return create_index_safe(self.collection, [('phone', 1)], PHONE_INDEX_NAME, unique=True)
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=str(doc['_id']),
            phone=doc['phone'],
            password_hash=doc['password'],
            first_name=doc.get('firstName', ''),
            last_name=doc.get('lastName', ''),
            avatar_logo=doc.get('avatarLogo') or None,
            amount=float(doc.get('amount', 0.0)),
            balance=float(doc.get('balance', 0.0)),
            point=int(doc.get('point', 0)),
            role=doc.get('role', 'user'),
        )

    def _to_document(self, user: User) -> dict:
        doc = {
            'phone': user.phone,
            'password': user.password_hash,
            'firstName': user.first_name,
            'lastName': user.last_name,
            'amount': user.amount,
            'balance': user.balance,
            'point': user.point,
            'role': user.role,
        }
        if user.avatar_logo:
            doc['avatarLogo'] = user.avatar_logo
        return doc

    def get_by_phone(self, phone: str) -> User | None:
        """Find a user by phone. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'phone': phone})
        except PyMongoError as e:
            logger.error("Failed to get user by phone", extra={"error": str(e)})
            raise StoreError("Failed to look up user") from e

        if doc is None:
            return None
        return self._to_domain(doc)

    def insert(self, user: User) -> str:
        """Insert a new user document and return its generated ID."""
        doc = self._to_document(user)
        doc['_id'] = ObjectId()
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            logger.warning("User creation failed: phone already exists")
            raise DuplicateError("User with this phone number already exists") from e
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"error": str(e)})
            raise StoreError("Failed to save user") from e

        user.id = str(doc['_id'])
        logger.info("User created", extra={"userId": user.id})
        return user.id
