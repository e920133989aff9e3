"""Chunk embedder - batched, retried embedding of text chunks."""

import asyncio
import re
from datetime import UTC, datetime

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    stop_after_attempt,
    wait_exponential,
)

from pdfingest.application.ports import EmbeddingProvider
from pdfingest.domain.entities import EmbeddingResult, TextChunk
from pdfingest.domain.exceptions import EmbeddingError

logger = structlog.get_logger(__name__)

# E5 models distinguish indexed passages from queries by this prefix
PASSAGE_PREFIX = "passage: "

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def make_vector_id(filename: str, chunk_index: int, created_at: datetime) -> str:
    """Vector id from filename, chunk index and creation time in epoch ms."""
    millis = int(created_at.timestamp() * 1000)
    return f"{_NON_ALNUM.sub('_', filename)}_{chunk_index}_{millis}"


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        "embedding_attempt_failed",
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        retry_in_seconds=retry_state.next_action.sleep if retry_state.next_action else None,
    )


class ChunkEmbedder:
    """
    Turns TextChunks into EmbeddingResults.

    Chunks are embedded in fixed-size batches. Calls within a batch run
    concurrently; batches run one after another with a short pause. Each
    call is retried with exponential backoff (backoff_seconds * 2**attempt).
    Output order always matches input order.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        batch_size: int = 10,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
        batch_delay_seconds: float = 0.1,
        expected_dimensions: int | None = None,
    ) -> None:
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self._provider = embedding_provider
        self._batch_size = batch_size
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds
        self._batch_delay_seconds = batch_delay_seconds
        self._expected_dimensions = expected_dimensions

    async def generate_embeddings(self, chunks: list[TextChunk]) -> list[EmbeddingResult]:
        """Embed all chunks. Raises EmbeddingError if any chunk fails."""
        results: list[EmbeddingResult] = []
        total = len(chunks)
        for i in range(0, total, self._batch_size):
            batch = chunks[i : i + self._batch_size]
            results.extend(await self._process_batch(batch))
            logger.info(
                "embeddings_batch_processed",
                processed=min(i + self._batch_size, total),
                total=total,
            )
            if i + self._batch_size < total:
                await self._pause()
        return results

    async def _pause(self) -> None:
        await asyncio.sleep(self._batch_delay_seconds)

    async def _process_batch(self, batch: list[TextChunk]) -> list[EmbeddingResult]:
        # First failure cancels the rest of the batch
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(self._embed_chunk(c)) for c in batch]
        except ExceptionGroup as eg:
            first = eg.exceptions[0]
            raise EmbeddingError(f"Failed to generate embeddings: {first}") from first
        return [t.result() for t in tasks]

    async def _embed_chunk(self, chunk: TextChunk) -> EmbeddingResult:
        prefixed = PASSAGE_PREFIX + chunk.text
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=self._backoff_seconds),
                before_sleep=_log_retry,
                reraise=True,
            ):
                with attempt:
                    values = await self._provider.embed(prefixed)
                    self._check_dimensions(values)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to embed chunk after {self._max_attempts} attempts: {e}"
            ) from e

        now = datetime.now(UTC)
        return EmbeddingResult(
            id=make_vector_id(chunk.filename, chunk.chunk_index, now),
            values=values,
            filename=chunk.filename,
            chunk_index=chunk.chunk_index,
            text=chunk.text,
            timestamp=now.isoformat(),
        )

    def _check_dimensions(self, values: list[float]) -> None:
        if self._expected_dimensions is None:
            return
        if len(values) != self._expected_dimensions:
            raise EmbeddingError(
                f"Unexpected embedding dimensionality: got {len(values)}, "
                f"expected {self._expected_dimensions}"
            )
