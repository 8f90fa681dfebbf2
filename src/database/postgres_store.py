"""
PostgreSQL implementation of the account and message repositories
"""

import logging
from typing import List, Optional

import asyncpg

from database.repositories import (
    AccountRepository,
    DuplicateKeyError,
    MessageRepository,
    MissingReferenceError,
    Store,
)
from database.schema import SCHEMA_STATEMENTS
from models.account import Account
from models.message import Message

logger = logging.getLogger(__name__)

ACCOUNT_COLUMNS = "account_id, username, password"
MESSAGE_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"

# SERIAL / INTEGER columns are int4; asyncpg rejects larger parameters outright
INT4_MIN = -2**31
INT4_MAX = 2**31 - 1


def parse_row_count(status: str) -> int:
    """Parse the affected row count from a command status such as 'DELETE 1' or 'UPDATE 0'"""
    if not status:
        return 0
    try:
        return int(status.split()[-1])
    except ValueError:
        return 0


def fits_int4(value: int) -> bool:
    return INT4_MIN <= value <= INT4_MAX


def _account_from_row(row) -> Optional[Account]:
    return Account(**dict(row)) if row else None


def _message_from_row(row) -> Optional[Message]:
    return Message(**dict(row)) if row else None


class PostgresAccountRepository(AccountRepository):

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        if not fits_int4(account_id):
            return None
        query = f"SELECT {ACCOUNT_COLUMNS} FROM account WHERE account_id = $1"
        logger.debug(f"Executing READ query: {query}")
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(query, account_id)
        return _account_from_row(row)

    async def find_by_username(self, username: str) -> Optional[Account]:
        query = f"SELECT {ACCOUNT_COLUMNS} FROM account WHERE username = $1"
        logger.debug(f"Executing READ query: {query}")
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(query, username)
        return _account_from_row(row)

    async def save(self, username: str, password: str) -> Account:
        query = f"INSERT INTO account (username, password) VALUES ($1, $2) RETURNING {ACCOUNT_COLUMNS}"
        logger.debug(f"Executing INSERT: {query}")
        async with self.pool.acquire() as conn:
            try:
                row = await conn.fetchrow(query, username, password)
            except asyncpg.UniqueViolationError as e:
                logger.warning(f"Unique constraint violation: {e}")
                raise DuplicateKeyError(f"Username already exists: {username}") from e

        if not row:
            raise RuntimeError("Insert operation failed - no data returned")
        return _account_from_row(row)


class PostgresMessageRepository(MessageRepository):

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def save(self, posted_by: int, message_text: str, time_posted_epoch: Optional[int]) -> Message:
        if not fits_int4(posted_by):
            raise MissingReferenceError(f"Account not found: {posted_by}")
        query = (
            "INSERT INTO message (posted_by, message_text, time_posted_epoch) "
            f"VALUES ($1, $2, $3) RETURNING {MESSAGE_COLUMNS}"
        )
        logger.debug(f"Executing INSERT: {query}")
        async with self.pool.acquire() as conn:
            try:
                row = await conn.fetchrow(query, posted_by, message_text, time_posted_epoch)
            except asyncpg.ForeignKeyViolationError as e:
                logger.warning(f"Foreign key constraint violation: {e}")
                raise MissingReferenceError(f"Account not found: {posted_by}") from e

        if not row:
            raise RuntimeError("Insert operation failed - no data returned")
        return _message_from_row(row)

    async def find_all(self) -> List[Message]:
        query = f"SELECT {MESSAGE_COLUMNS} FROM message ORDER BY message_id"
        logger.debug(f"Executing READ query: {query}")
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query)
        return [_message_from_row(row) for row in rows]

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        if not fits_int4(message_id):
            return None
        query = f"SELECT {MESSAGE_COLUMNS} FROM message WHERE message_id = $1"
        logger.debug(f"Executing READ query: {query}")
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(query, message_id)
        return _message_from_row(row)

    async def find_by_posted_by(self, posted_by: int) -> List[Message]:
        if not fits_int4(posted_by):
            return []
        query = f"SELECT {MESSAGE_COLUMNS} FROM message WHERE posted_by = $1 ORDER BY message_id"
        logger.debug(f"Executing READ query: {query}")
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, posted_by)
        return [_message_from_row(row) for row in rows]

    async def update_text(self, message_id: int, message_text: str) -> int:
        if not fits_int4(message_id):
            return 0
        query = "UPDATE message SET message_text = $1 WHERE message_id = $2"
        logger.debug(f"Executing UPDATE: {query}")
        async with self.pool.acquire() as conn:
            status = await conn.execute(query, message_text, message_id)
        return parse_row_count(status)

    async def delete_by_id(self, message_id: int) -> int:
        if not fits_int4(message_id):
            return 0
        query = "DELETE FROM message WHERE message_id = $1"
        logger.debug(f"Executing DELETE: {query}")
        async with self.pool.acquire() as conn:
            status = await conn.execute(query, message_id)
        return parse_row_count(status)


class PostgresStore(Store):
    """Store backed by an asyncpg connection pool owned by the process"""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.accounts = PostgresAccountRepository(pool)
        self.messages = PostgresMessageRepository(pool)

    async def create_schema(self) -> None:
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                for statement in SCHEMA_STATEMENTS:
                    await conn.execute(statement)
        logger.info("Database schema verified")

    async def ping(self) -> bool:
        async with self.pool.acquire() as conn:
            return await conn.fetchval("SELECT 1") == 1

    async def close(self) -> None:
        await self.pool.close()
