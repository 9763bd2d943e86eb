# tasklist/db/__init__.py
"""
Database module.
"""
from typing import Optional

from tasklist.core.config import settings
from tasklist.core.logging import log

# Motor client instance
_client = None
_db = None
_connection_error: Optional[str] = None


async def connect_db(mongo_uri: Optional[str] = None):
    """
    Connect to MongoDB and register the Beanie documents.

    If MongoDB is not available, stores the error for later retrieval
    and re-raises so startup fails loudly.
    """
    global _client, _db, _connection_error
    from motor.motor_asyncio import AsyncIOMotorClient
    from beanie import init_beanie
    from tasklist.store.beanie_store import TaskDocument

    uri = mongo_uri or settings.store.mongo_uri
    try:
        _client = AsyncIOMotorClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.store.server_selection_timeout_ms,
        )

        try:
            _db = _client.get_default_database()
        except Exception:
            _db = _client.tasklist

        # Fails fast if MongoDB is not running
        await _client.admin.command("ping")
        log("DB", f"Connected to MongoDB database '{_db.name}'")

        await init_beanie(database=_db, document_models=[TaskDocument])
        log("DB", "Beanie ODM initialized (TTL index on created_at)")
        _connection_error = None
    except Exception as e:
        _connection_error = str(e)
        log("DB", f"MongoDB not available: {_connection_error}")
        _client = None
        _db = None
        raise


async def disconnect_db():
    """Disconnect from MongoDB."""
    global _client, _db
    if _client:
        _client.close()
        log("DB", "Disconnected from MongoDB")
    _client = None
    _db = None


def is_connected() -> bool:
    """Check if database is connected."""
    return _db is not None


def connection_error() -> Optional[str]:
    return _connection_error
