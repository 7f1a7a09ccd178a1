"""MongoDB index management used at app startup."""

from logging import getLogger

from pymongo.collection import Collection
from pymongo.errors import OperationFailure

logger = getLogger(__name__)

# Server error codes for an index that exists with other options or another name
INDEX_CONFLICT_CODES = {85, 86}


def create_index_safe(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing an existing one whose spec conflicts.

    Any index on the same keys (or with the same name) but different options
    is dropped and recreated with the requested spec.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except OperationFailure as e:
        if e.code not in INDEX_CONFLICT_CODES:
            raise

    wanted = dict(keys)
    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue
        if existing_name == name or dict(info.get('key', [])) == wanted:
            logger.warning("Dropping conflicting index", extra={"index": existing_name})
            collection.drop_index(existing_name)

    collection.create_index(keys, name=name, **kwargs)
    logger.info("Recreated index", extra={"index": name})
    return True


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
