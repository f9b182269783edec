"""Health check endpoints."""

import logging

import falcon.asgi
import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness, and readiness backed by a database round trip."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 while the database cannot be reached."""
        try:
            async with self._pool.connection() as conn:
                await conn.execute("SELECT 1")
        except (psycopg.OperationalError, PoolTimeout) as e:
            logger.warning("Readiness check failed: %s", e)
            resp.media = {"status": "unavailable", "error": "Database unavailable"}
            resp.status = falcon.HTTP_503
            return

        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
