# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Database connection management with asyncpg connection pooling."""

import contextlib
from collections.abc import AsyncIterator
from typing import Any

import asyncpg
from attrs import field, frozen
from beartype import beartype

from .config import Settings, get_settings
from .logging_utils import get_logger

logger = get_logger(__name__)


@frozen
class DatabaseConfig:
    """Connection pool configuration."""

    url: str = field()
    min_size: int = field(default=2)
    max_size: int = field(default=10)
    command_timeout: float = field(default=30.0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseConfig":
        return cls(
            url=settings.database_url,
            min_size=settings.database_pool_min,
            max_size=settings.database_pool_max,
            command_timeout=settings.database_command_timeout,
        )


class Database:
    """Thin asyncpg pool wrapper."""

    def __init__(self, config: DatabaseConfig | None = None) -> None:
        self._config = config or DatabaseConfig.from_settings(get_settings())
        self._pool: asyncpg.Pool | None = None

    @beartype
    async def connect(self) -> None:
        """Create the connection pool."""
        if self._pool is not None:
            return

        self._pool = await asyncpg.create_pool(
            self._config.url,
            min_size=self._config.min_size,
            max_size=self._config.max_size,
            command_timeout=self._config.command_timeout,
        )
        logger.info(
            "Database pool ready (min=%d, max=%d)",
            self._config.min_size,
            self._config.max_size,
        )

    @beartype
    async def disconnect(self) -> None:
        """Close the connection pool."""
        if self._pool is not None:
            await self._pool.close()
        self._pool = None

    @contextlib.asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a pooled connection."""
        if self._pool is None:
            raise RuntimeError("Database pool is not initialized; call connect() first")
        async with self._pool.acquire() as conn:
            yield conn

    @beartype
    async def execute(self, query: str, *args: Any) -> str:
        """Execute a query without returning results."""
        async with self.acquire() as conn:
            return await conn.execute(query, *args)

    @beartype
    async def fetch(self, query: str, *args: Any) -> list[Any]:
        """Execute a query and fetch all results."""
        async with self.acquire() as conn:
            return await conn.fetch(query, *args)

    @beartype
    async def fetchrow(self, query: str, *args: Any) -> Any:
        """Execute a query and fetch a single row."""
        async with self.acquire() as conn:
            return await conn.fetchrow(query, *args)

    @beartype
    async def fetchval(self, query: str, *args: Any) -> Any:
        """Execute a query and fetch a single value."""
        async with self.acquire() as conn:
            return await conn.fetchval(query, *args)

    @property
    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self._pool is not None
