"""Pinecone vector store adapter."""

import asyncio
from typing import Any

import structlog
from pinecone import Pinecone

logger = structlog.get_logger(__name__)


class PineconeVectorStore:
    """
    VectorStore backed by a Pinecone index.

    The Pinecone SDK is synchronous; calls run in a worker thread so the
    event loop stays free while a batch is in flight.
    """

    def __init__(
        self,
        api_key: str,
        index_name: str,
        namespace: str = "",
        _client: Any = None,
    ) -> None:
        self._index_name = index_name
        self._namespace = namespace
        self._client = _client if _client is not None else Pinecone(api_key=api_key)
        self._index = self._client.Index(index_name)

    @property
    def index_name(self) -> str:
        return self._index_name

    async def upsert(self, vectors: list[dict[str, Any]]) -> int:
        """Upsert {id, values, metadata} records; returns the acknowledged count."""
        if not vectors:
            return 0

        def _upsert_sync() -> int:
            kwargs: dict[str, Any] = {"vectors": vectors}
            if self._namespace:
                kwargs["namespace"] = self._namespace
            response = self._index.upsert(**kwargs)
            count = getattr(response, "upserted_count", None)
            return count if isinstance(count, int) else len(vectors)

        return await asyncio.to_thread(_upsert_sync)

    async def describe_stats(self) -> dict[str, Any]:
        """Index statistics: dimension and vector counts."""
        stats = await asyncio.to_thread(self._index.describe_index_stats)
        result = {
            "index_name": self._index_name,
            "dimension": getattr(stats, "dimension", None),
            "total_vector_count": getattr(stats, "total_vector_count", None),
        }
        logger.debug("pinecone_stats_fetched", **result)
        return result
