"""Database connection and lifecycle management."""

import logging

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from employee_api.config import Settings, get_settings
from employee_api.constants.validation import EMPLOYEES_COLLECTION, USERS_COLLECTION

logger = logging.getLogger(__name__)

_client: AsyncMongoClient | None = None


def create_client(settings: Settings) -> AsyncMongoClient:
    """Create a MongoDB client from settings.

    The client connects lazily; no network round trip happens here.
    """
    return AsyncMongoClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        tz_aware=True,
    )


async def ensure_indexes(db: AsyncDatabase) -> None:
    """Create the unique indexes the services rely on.

    Duplicate checks in the services are a fast path only. These indexes
    are what actually guarantees uniqueness under concurrent writes.
    """
    await db[USERS_COLLECTION].create_index([("username", ASCENDING)], unique=True)
    await db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    await db[EMPLOYEES_COLLECTION].create_index([("email", ASCENDING)], unique=True)


async def connect() -> AsyncDatabase:
    """Open the process-wide client and prepare the database."""
    global _client
    settings = get_settings()
    if _client is None:
        _client = create_client(settings)
    db = _client[settings.mongo_db_name]
    await db.command("ping")
    await ensure_indexes(db)
    logger.info(f"Connected to MongoDB database '{settings.mongo_db_name}'")
    return db


async def close() -> None:
    """Close the process-wide client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("MongoDB connection closed")


def get_db() -> AsyncDatabase:
    """Get database dependency.

    Raises:
        RuntimeError: If called before the application connected
    """
    if _client is None:
        raise RuntimeError("Database client is not initialized")
    return _client[get_settings().mongo_db_name]
