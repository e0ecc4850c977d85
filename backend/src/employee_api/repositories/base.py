"""Base repository with common document store operations."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from employee_api.exceptions import ConflictError, StoreError
from employee_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def to_object_id(id: str) -> ObjectId | None:
    """Convert a hex identifier to an ObjectId, or None if malformed."""
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        return None


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations.

    Timestamps are managed here: ``created_at`` and ``updated_at`` are set on
    insert and ``updated_at`` is refreshed on every update.
    """

    collection_name: str
    model: type[T]

    def __init__(self, db: AsyncDatabase) -> None:
        """Initialize repository with a database handle."""
        self.db = db
        self.collection: AsyncCollection = db[self.collection_name]

    def _to_model(self, document: dict[str, Any]) -> T:
        return self.model.from_document(document)

    def _duplicate_error(self, fields: dict[str, Any]) -> ConflictError:
        """Build the error raised when a unique index rejects an insert."""
        return ConflictError("Resource already exists")

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        """Translate driver failures into StoreError."""
        try:
            yield
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            log_error(logger, f"Store operation '{operation}' failed on {self.collection_name}", e)
            raise StoreError(f"Database error during {operation}") from e

    async def get_by_id(self, id: str) -> T | None:
        """Get a record by ID.

        Args:
            id: Record identifier (24 hex characters)

        Returns:
            Record or None if not found
        """
        object_id = to_object_id(id)
        if object_id is None:
            return None
        return await self.find_one({"_id": object_id})

    async def find_one(self, filter: dict[str, Any]) -> T | None:
        """Get the first record matching a filter."""
        with self._store_errors("find_one"):
            document = await self.collection.find_one(filter)
        return self._to_model(document) if document is not None else None

    async def find(self, filter: dict[str, Any] | None = None) -> list[T]:
        """Get every record matching a filter.

        Args:
            filter: Equality filter, or None for all records

        Returns:
            List of records (possibly empty)
        """
        with self._store_errors("find"):
            cursor = self.collection.find(filter or {})
            documents = await cursor.to_list(length=None)
        return [self._to_model(document) for document in documents]

    async def exists(self, filter: dict[str, Any]) -> bool:
        """Check whether any record matches a filter."""
        with self._store_errors("exists"):
            document = await self.collection.find_one(filter, projection={"_id": 1})
        return document is not None

    async def create(self, **fields: Any) -> T:
        """Create a new record.

        Args:
            **fields: Field values

        Returns:
            Created record with its generated identifier

        Raises:
            ConflictError: If a unique index rejects the record
        """
        now = datetime.now(timezone.utc)
        document = {**fields, "created_at": now, "updated_at": now}
        try:
            with self._store_errors("create"):
                result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise self._duplicate_error(fields) from e
        document["_id"] = result.inserted_id
        return self._to_model(document)

    async def update(self, id: str, **fields: Any) -> T | None:
        """Update a record by ID.

        Args:
            id: Record identifier
            **fields: Fields to overwrite

        Returns:
            Updated record or None if not found
        """
        object_id = to_object_id(id)
        if object_id is None:
            return None

        update = {"$set": {**fields, "updated_at": datetime.now(timezone.utc)}}
        with self._store_errors("update"):
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        return self._to_model(document) if document is not None else None

    async def delete(self, id: str) -> bool:
        """Delete a record by ID.

        Args:
            id: Record identifier

        Returns:
            True if deleted, False if not found
        """
        object_id = to_object_id(id)
        if object_id is None:
            return False

        with self._store_errors("delete"):
            result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
