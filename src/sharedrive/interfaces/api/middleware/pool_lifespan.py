"""Database pool lifespan - the pool is open only while the ASGI server runs."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the grant store pool on ASGI startup and closes it on shutdown.

    With wait_timeout set, startup blocks until min_size connections exist,
    so the server refuses to start against an unreachable database.
    """

    def __init__(self, pool: AsyncConnectionPool, wait_timeout: float | None = None) -> None:
        self._pool = pool
        self._wait_timeout = wait_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        if self._wait_timeout is None:
            await self._pool.open()
        else:
            await self._pool.open(wait=True, timeout=self._wait_timeout)
        logger.info("Database pool open (%s)", self._pool.name)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool closed (%s)", self._pool.name)
