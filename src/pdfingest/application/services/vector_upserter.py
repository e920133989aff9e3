"""Vector upserter - batched writes into the vector index."""

import asyncio
from typing import Any

import structlog

from pdfingest.application.ports import VectorStore
from pdfingest.domain.entities import EmbeddingResult
from pdfingest.domain.exceptions import StorageError

logger = structlog.get_logger(__name__)


class VectorUpserter:
    """Writes EmbeddingResults to a VectorStore in sequential batches."""

    def __init__(
        self,
        vector_store: VectorStore,
        batch_size: int = 50,
        batch_delay_seconds: float = 0.1,
    ) -> None:
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._store = vector_store
        self._batch_size = batch_size
        self._batch_delay_seconds = batch_delay_seconds

    async def upsert(self, embeddings: list[EmbeddingResult]) -> int:
        """Upsert all embeddings; returns the number of vectors written."""
        total = len(embeddings)
        upserted = 0
        try:
            for i in range(0, total, self._batch_size):
                batch = embeddings[i : i + self._batch_size]
                vectors = [
                    {"id": e.id, "values": e.values, "metadata": e.metadata()}
                    for e in batch
                ]
                upserted += await self._store.upsert(vectors)
                logger.info(
                    "vectors_batch_upserted",
                    processed=min(i + self._batch_size, total),
                    total=total,
                )
                if i + self._batch_size < total:
                    await self._pause()
        except Exception as e:
            raise StorageError(f"Failed to upsert vectors: {e}") from e
        return upserted

    async def verify_connection(self) -> dict[str, Any]:
        """Fetch index stats; raises StorageError when the index is unreachable."""
        try:
            stats = await self._store.describe_stats()
        except Exception as e:
            raise StorageError(f"Failed to connect to vector index: {e}") from e
        logger.info("vector_index_connected", **stats)
        return stats

    async def _pause(self) -> None:
        await asyncio.sleep(self._batch_delay_seconds)
