import os
import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGODB_CONN_STRING = os.getenv('MONGODB_CONN_STRING')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'test')
USERS_COLLECTION_NAME = 'users'

_client_cache: MongoClient | None = None
_connection_attempted = False
_connection_failed = False


def reset_client():
    """Forget the cached client and any earlier connection failure."""
    global _client_cache, _connection_attempted, _connection_failed
    _client_cache = None
    _connection_attempted = False
    _connection_failed = False


def get_mongodb_client() -> MongoClient | None:
    """Get a cached MongoDB client, connecting on first use.

    A cached client that no longer answers ping is dropped and rebuilt.
    A missing connection string or a failed first connection is remembered,
    and later calls return None without retrying. Once a connection has
    succeeded, a failed reconnect is retried on the next call.

    Returns:
        MongoDB client or None if no connection is available
    """
    global _client_cache, _connection_attempted, _connection_failed

    if _client_cache is not None:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            logger.debug("[MONGODB] Cached client failed ping, reconnecting")
            _client_cache = None

    if _connection_failed:
        return None

    if not MONGODB_CONN_STRING:
        logger.error("[MONGODB] MONGODB_CONN_STRING not configured")
        _connection_failed = True
        return None

    try:
        client = MongoClient(
            MONGODB_CONN_STRING,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            maxPoolSize=20,
        )
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error("[MONGODB] Connection failed", extra={"error": str(e)[:200]})
        if not _connection_attempted:
            _connection_failed = True
        return None

    _connection_attempted = True
    logger.info("[MONGODB] Connected", extra={"database": DATABASE_NAME})
    _client_cache = client
    return client
