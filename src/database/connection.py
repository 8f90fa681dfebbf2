"""
Database connection and store lifecycle management
"""

import asyncpg
import logging
from typing import Optional

from config.settings import (
    DATABASE_URL,
    DB_COMMAND_TIMEOUT,
    DB_POOL_MAX_SIZE,
    DB_POOL_MIN_SIZE,
    is_memory_database,
)
from database.memory_store import MemoryStore
from database.postgres_store import PostgresStore
from database.repositories import Store

logger = logging.getLogger(__name__)

async def init_database(database_url: Optional[str] = None) -> Store:
    """Create the store for the configured database URL"""
    url = database_url or DATABASE_URL
    if not url:
        raise ValueError("DATABASE_URL environment variable is required")

    if is_memory_database(url):
        logger.info("In-memory store initialized")
        return MemoryStore()

    pool = await asyncpg.create_pool(
        url,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        command_timeout=DB_COMMAND_TIMEOUT,
        statement_cache_size=0  # pgbouncer compatibility
    )
    store = PostgresStore(pool)

    # Test connection
    await store.ping()
    await store.create_schema()

    logger.info("Database initialized successfully")
    return store


async def close_database(store: Optional[Store]):
    """Close the store and any pooled connections"""
    if store:
        await store.close()
    logger.info("Database connections closed")
