"""Health check endpoints."""

from datetime import UTC, datetime

import falcon
import falcon.asgi

from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.domain.exceptions import StorageError


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, upserter: VectorUpserter | None = None) -> None:
        self._upserter = upserter

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness."""
        resp.media = {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness (vector index reachable)."""
        if self._upserter is not None:
            try:
                await self._upserter.verify_connection()
            except StorageError as e:
                resp.media = {"status": "unavailable", "message": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
