"""
PostgreSQL repositories exercised against a fake connection pool
"""

from contextlib import asynccontextmanager

import asyncpg
import pytest

from database.postgres_store import PostgresAccountRepository, PostgresMessageRepository, parse_row_count
from database.repositories import DuplicateKeyError, MissingReferenceError


class FakeConnection:
    """Records queries and answers with canned results"""

    def __init__(self, fetchrow_result=None, fetch_result=None, execute_result="", error=None):
        self.fetchrow_result = fetchrow_result
        self.fetch_result = fetch_result or []
        self.execute_result = execute_result
        self.error = error
        self.queries = []

    async def fetchrow(self, query, *params):
        self.queries.append((query, params))
        if self.error:
            raise self.error
        return self.fetchrow_result

    async def fetch(self, query, *params):
        self.queries.append((query, params))
        return self.fetch_result

    async def execute(self, query, *params):
        self.queries.append((query, params))
        return self.execute_result


class FakePool:

    def __init__(self, conn):
        self.conn = conn

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


@pytest.mark.parametrize("status,expected", [
    ("DELETE 1", 1),
    ("DELETE 0", 0),
    ("UPDATE 1", 1),
    ("", 0),
    (None, 0),
])
def test_parse_row_count(status, expected):
    assert parse_row_count(status) == expected


class TestPostgresAccountRepository:

    @pytest.mark.asyncio
    async def test_save_returns_account(self):
        conn = FakeConnection(fetchrow_result={"account_id": 7, "username": "alice", "password": "pass1"})
        repository = PostgresAccountRepository(FakePool(conn))

        account = await repository.save("alice", "pass1")

        assert account.account_id == 7
        query, params = conn.queries[0]
        assert query.startswith("INSERT INTO account")
        assert params == ("alice", "pass1")

    @pytest.mark.asyncio
    async def test_unique_violation_raises_duplicate(self):
        conn = FakeConnection(error=asyncpg.UniqueViolationError("duplicate key value"))
        repository = PostgresAccountRepository(FakePool(conn))

        with pytest.raises(DuplicateKeyError):
            await repository.save("alice", "pass1")

    @pytest.mark.asyncio
    async def test_find_by_username_missing(self):
        repository = PostgresAccountRepository(FakePool(FakeConnection()))
        assert await repository.find_by_username("nobody") is None


class TestPostgresMessageRepository:

    @pytest.mark.asyncio
    async def test_foreign_key_violation_raises_missing_reference(self):
        conn = FakeConnection(error=asyncpg.ForeignKeyViolationError("violates foreign key constraint"))
        repository = PostgresMessageRepository(FakePool(conn))

        with pytest.raises(MissingReferenceError):
            await repository.save(99, "hi", None)

    @pytest.mark.asyncio
    async def test_find_all_ordered_by_id(self):
        rows = [
            {"message_id": 1, "posted_by": 1, "message_text": "one", "time_posted_epoch": None},
            {"message_id": 2, "posted_by": 1, "message_text": "two", "time_posted_epoch": 5},
        ]
        conn = FakeConnection(fetch_result=rows)
        repository = PostgresMessageRepository(FakePool(conn))

        messages = await repository.find_all()

        assert [m.message_text for m in messages] == ["one", "two"]
        assert conn.queries[0][0].endswith("ORDER BY message_id")

    @pytest.mark.asyncio
    async def test_delete_and_update_counts(self):
        repository = PostgresMessageRepository(FakePool(FakeConnection(execute_result="DELETE 0")))
        assert await repository.delete_by_id(1) == 0

        repository = PostgresMessageRepository(FakePool(FakeConnection(execute_result="UPDATE 1")))
        assert await repository.update_text(1, "edited") == 1


class TestOutOfRangeIds:
    """Ids beyond the int4 columns are treated as absent without reaching the database"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("record_id", [2**31, -2**31 - 1, 3_000_000_000])
    async def test_message_lookups_are_absent(self, record_id):
        conn = FakeConnection()
        repository = PostgresMessageRepository(FakePool(conn))

        assert await repository.find_by_id(record_id) is None
        assert await repository.find_by_posted_by(record_id) == []
        assert await repository.update_text(record_id, "edited") == 0
        assert await repository.delete_by_id(record_id) == 0
        assert conn.queries == []

    @pytest.mark.asyncio
    async def test_account_lookup_is_absent(self):
        conn = FakeConnection()
        repository = PostgresAccountRepository(FakePool(conn))

        assert await repository.find_by_id(2**31) is None
        assert conn.queries == []

    @pytest.mark.asyncio
    async def test_save_with_out_of_range_author(self):
        conn = FakeConnection()
        repository = PostgresMessageRepository(FakePool(conn))

        with pytest.raises(MissingReferenceError):
            await repository.save(2**31, "hi", None)
        assert conn.queries == []

    @pytest.mark.asyncio
    async def test_largest_int4_id_is_queried(self):
        conn = FakeConnection()
        repository = PostgresMessageRepository(FakePool(conn))

        assert await repository.find_by_id(2**31 - 1) is None
        assert conn.queries[0][1] == (2**31 - 1,)
