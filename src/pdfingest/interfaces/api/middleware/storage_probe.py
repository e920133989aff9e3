"""Storage probe middleware - verifies the vector index on startup."""

from typing import Any

from pdfingest.application.services.vector_upserter import VectorUpserter


class StorageProbeMiddleware:
    """Fails ASGI startup when the vector index is unreachable."""

    def __init__(self, upserter: VectorUpserter) -> None:
        self._upserter = upserter

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Raises StorageError, which aborts server startup."""
        await self._upserter.verify_connection()
