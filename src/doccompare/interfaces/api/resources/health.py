"""Health check endpoints."""

import logging

import falcon.asgi
import psycopg
from psycopg_pool import AsyncConnectionPool

from doccompare import __version__

logger = logging.getLogger(__name__)

READY_TIMEOUT_SECONDS = 2.0


class HealthResource:
    """Health and readiness endpoints.

    Readiness runs a trivial query on the version store pool when one is given.
    """

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok", "version": __version__}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness."""
        if self._pool is not None:
            try:
                async with self._pool.connection(timeout=READY_TIMEOUT_SECONDS) as conn:
                    await conn.execute("SELECT 1")
            except psycopg.OperationalError as e:
                # PoolTimeout and PoolClosed are OperationalError subclasses
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
