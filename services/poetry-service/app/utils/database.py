"""
Database Connection Utilities
Connection pool for the poetry database
"""

import asyncio
import asyncpg
from pathlib import Path
from typing import Optional, List, Any
import logging
from contextlib import asynccontextmanager

import shared

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(shared.__file__).parent / "configs" / "postgres" / "schema.sql"

# Driver and transport failures that services report as StoreError
DATABASE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class PoetryDatabase:
    """Async PostgreSQL connection pool for poems, users, likes and reports"""

    def __init__(
        self,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: float = 60,
        ssl: bool = False
    ):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self.ssl = ssl
        self.pool: Optional[asyncpg.Pool] = None

    @classmethod
    def from_settings(cls, settings) -> "PoetryDatabase":
        return cls(
            dsn=settings.dsn,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
            ssl=settings.db_ssl,
        )

    async def initialize(self):
        """Create and test connection pool"""
        try:
            self.pool = await asyncpg.create_pool(
                self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
                ssl="require" if self.ssl else None,
            )

            async with self.pool.acquire() as conn:
                result = await conn.fetchval("SELECT NOW()")
                logger.info(f"Database connected: {result}")

        except Exception as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    async def close(self):
        """Close connection pool gracefully"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database connection pool closed")

    def get_pool(self) -> asyncpg.Pool:
        if not self.pool:
            raise RuntimeError("Database pool not initialized. Call initialize() first.")
        return self.pool

    @asynccontextmanager
    async def connection(self):
        """Get database connection from pool"""
        async with self.get_pool().acquire() as conn:
            yield conn

    @asynccontextmanager
    async def transaction(self):
        """
        Get a connection with an open transaction

        Commits when the block exits normally and rolls back when it raises.
        """
        async with self.connection() as conn:
            async with conn.transaction():
                yield conn

    async def fetch(self, query: str, *args) -> List[dict]:
        """Execute a query and return all rows as dicts"""
        async with self.connection() as conn:
            rows = await conn.fetch(query, *args)
        return [dict(row) for row in rows]

    async def fetchrow(self, query: str, *args) -> Optional[dict]:
        """Execute a query and return the first row or None"""
        async with self.connection() as conn:
            row = await conn.fetchrow(query, *args)
        return dict(row) if row else None

    async def fetchval(self, query: str, *args) -> Any:
        """Execute a query and return single value"""
        async with self.connection() as conn:
            return await conn.fetchval(query, *args)

    async def execute(self, query: str, *args) -> str:
        """Execute a command (INSERT, DELETE) and return its status tag"""
        async with self.connection() as conn:
            return await conn.execute(query, *args)

    async def apply_schema(self, path: Path = SCHEMA_PATH):
        """Create tables if they do not exist"""
        sql = path.read_text()
        async with self.connection() as conn:
            await conn.execute(sql)
        logger.info(f"Database schema applied from {path.name}")

    async def ping(self) -> bool:
        async with self.connection() as conn:
            return await conn.fetchval("SELECT 1") == 1


def affected_rows(status: str) -> int:
    """Row count from a command status tag such as 'DELETE 3'"""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0
