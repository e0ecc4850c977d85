"""Shared test configuration and an in-memory document store.

The fake collection implements the subset of the async driver API the
repositories use, including unique index enforcement, so services can be
exercised without a MongoDB server.
"""

import copy
import os
from typing import Any

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Set required env vars BEFORE importing app modules
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "employee_management_test")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("ENVIRONMENT", "development")

TEST_JWT_SECRET = os.environ["JWT_SECRET"]


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    for key, expected in filter.items():
        if key == "$or":
            if not any(_matches(document, clause) for clause in expected):
                return False
        elif document.get(key) != expected:
            return False
    return True


class _InsertOneResult:
    def __init__(self, inserted_id: ObjectId) -> None:
        self.inserted_id = inserted_id


class _DeleteResult:
    def __init__(self, deleted_count: int) -> None:
        self.deleted_count = deleted_count


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """In-memory stand-in for an async MongoDB collection."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: list[dict[str, Any]] = []
        self.unique_fields: set[str] = set()
        self.calls: list[str] = []

    async def create_index(self, keys: list[tuple[str, int]], unique: bool = False) -> str:
        self.calls.append("create_index")
        if unique:
            self.unique_fields.update(field for field, _ in keys)
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    async def find_one(
        self, filter: dict[str, Any], projection: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        self.calls.append("find_one")
        for document in self.documents:
            if _matches(document, filter):
                return copy.deepcopy(document)
        return None

    def find(self, filter: dict[str, Any]) -> FakeCursor:
        self.calls.append("find")
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, filter)])

    async def insert_one(self, document: dict[str, Any]) -> _InsertOneResult:
        self.calls.append("insert_one")
        for field in self.unique_fields:
            if any(existing.get(field) == document.get(field) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} index: {field}_1")
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return _InsertOneResult(stored["_id"])

    async def find_one_and_update(
        self,
        filter: dict[str, Any],
        update: dict[str, Any],
        return_document: ReturnDocument = ReturnDocument.BEFORE,
    ) -> dict[str, Any] | None:
        self.calls.append("find_one_and_update")
        for document in self.documents:
            if _matches(document, filter):
                before = copy.deepcopy(document)
                document.update(copy.deepcopy(update.get("$set", {})))
                return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, filter: dict[str, Any]) -> _DeleteResult:
        self.calls.append("delete_one")
        for index, document in enumerate(self.documents):
            if _matches(document, filter):
                del self.documents[index]
                return _DeleteResult(1)
        return _DeleteResult(0)


class FakeDatabase:
    """In-memory stand-in for an async MongoDB database."""

    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name: str) -> dict[str, Any]:
        return {"ok": 1.0}

    def total_calls(self) -> int:
        return sum(len(collection.calls) for collection in self.collections.values())


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Fresh in-memory database with the unique indexes of production."""
    db = FakeDatabase()
    db["users"].unique_fields = {"username", "email"}
    db["employees"].unique_fields = {"email"}
    return db


@pytest.fixture
def password_service():
    """Password service with the minimum bcrypt cost for fast tests."""
    from employee_api.security.password import PasswordService

    return PasswordService(rounds=4)


@pytest.fixture
def token_service():
    """Token service signing with the test secret."""
    from employee_api.security.auth import TokenService

    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def employee_service(fake_db):
    from employee_api.services.employee_service import EmployeeService

    return EmployeeService(fake_db)


@pytest.fixture
def auth_service(fake_db, password_service, token_service):
    from employee_api.services.auth_service import AuthService

    return AuthService(fake_db, password_service=password_service, token_service=token_service)


@pytest.fixture
def employee_data() -> dict[str, Any]:
    """Valid addEmployee input."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "gender": "Female",
        "designation": "Engineer",
        "salary": 95000.0,
        "date_of_joining": "2023-01-15",
        "department": "R&D",
        "employee_photo": "https://cdn.example.com/photos/ada.PNG",
    }
