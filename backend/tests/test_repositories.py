"""Repository and store setup tests."""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from employee_api.database import ensure_indexes
from employee_api.exceptions import (
    EmployeeAlreadyExistsError,
    StoreError,
    UserAlreadyExistsError,
)
from employee_api.repositories import EmployeeRepository, UserRepository
from employee_api.repositories.base import to_object_id


class TestToObjectId:
    """Tests for to_object_id."""

    def test_valid_hex(self) -> None:
        assert str(to_object_id("65a1f0c2e4b0a1b2c3d4e5f6")) == "65a1f0c2e4b0a1b2c3d4e5f6"

    @pytest.mark.parametrize("value", ["xyz", "", None])
    def test_malformed(self, value) -> None:
        assert to_object_id(value) is None


class TestBaseRepository:
    """Tests for the shared CRUD operations."""

    @pytest.mark.asyncio
    async def test_create_sets_timestamps(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)

        employee = await repo.create(**employee_data)

        assert employee.created_at is not None
        assert employee.created_at == employee.updated_at
        assert employee.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at_only(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)
        employee = await repo.create(**employee_data)

        updated = await repo.update(employee.id, department="Ops")

        assert updated.department == "Ops"
        assert updated.created_at == employee.created_at
        assert updated.updated_at >= employee.updated_at

    @pytest.mark.asyncio
    async def test_malformed_id_skips_store(self, fake_db) -> None:
        repo = EmployeeRepository(fake_db)

        assert await repo.get_by_id("xyz") is None
        assert await repo.update("xyz", department="Ops") is None
        assert await repo.delete("xyz") is False
        assert fake_db.total_calls() == 0

    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)
        employee = await repo.create(**employee_data)

        assert await repo.delete(employee.id) is True
        assert await repo.delete(employee.id) is False

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_store_error(self, fake_db, monkeypatch) -> None:
        repo = EmployeeRepository(fake_db)

        async def unreachable(*args, **kwargs):
            raise ServerSelectionTimeoutError("mongodb://db.internal:27017 unreachable")

        monkeypatch.setattr(fake_db["employees"], "find_one", unreachable)

        with pytest.raises(StoreError, match="Database error during find_one"):
            await repo.get_by_id("65a1f0c2e4b0a1b2c3d4e5f6")


class TestEmployeeRepository:
    """Tests for employee-specific queries."""

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_employee_conflict(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)
        await repo.create(**employee_data)

        with pytest.raises(EmployeeAlreadyExistsError):
            await repo.create(**employee_data)

    @pytest.mark.asyncio
    async def test_email_exists_is_exact(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)
        await repo.create(**employee_data)

        assert await repo.email_exists("ada@example.com")
        assert not await repo.email_exists("ADA@example.com")

    @pytest.mark.asyncio
    async def test_search_ignores_empty_filters(self, fake_db, employee_data) -> None:
        repo = EmployeeRepository(fake_db)
        await repo.create(**employee_data)

        found = await repo.search(designation="Engineer", department="")

        assert [e.email for e in found] == ["ada@example.com"]


class TestUserRepository:
    """Tests for user-specific queries."""

    @pytest.mark.asyncio
    async def test_hash_stored_under_password_key(self, fake_db) -> None:
        repo = UserRepository(fake_db)

        user = await repo.create_user("alice", "a@x.com", "$2b$04$hash")

        assert fake_db["users"].documents[0]["password"] == "$2b$04$hash"
        assert user.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_lookup_matches_username_or_email(self, fake_db) -> None:
        repo = UserRepository(fake_db)
        user = await repo.create_user("alice", "a@x.com", "h")

        assert (await repo.get_by_username_or_email("alice")).id == user.id
        assert (await repo.get_by_username_or_email("a@x.com")).id == user.id
        assert (await repo.get_by_username_or_email("bob", "a@x.com")).id == user.id
        assert await repo.get_by_username_or_email("bob") is None

    @pytest.mark.asyncio
    async def test_duplicate_maps_to_user_conflict(self, fake_db) -> None:
        repo = UserRepository(fake_db)
        await repo.create_user("alice", "a@x.com", "h")

        with pytest.raises(UserAlreadyExistsError):
            await repo.create_user("alice", "b@x.com", "h")


class TestEnsureIndexes:
    """Tests for store setup."""

    @pytest.mark.asyncio
    async def test_unique_indexes_created(self, fake_db) -> None:
        fake_db["users"].unique_fields = set()
        fake_db["employees"].unique_fields = set()

        await ensure_indexes(fake_db)

        assert fake_db["users"].unique_fields == {"username", "email"}
        assert fake_db["employees"].unique_fields == {"email"}
        assert fake_db["users"].calls == ["create_index", "create_index"]
