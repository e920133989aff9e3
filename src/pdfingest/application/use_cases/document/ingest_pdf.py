"""Ingest PDF use case."""

import asyncio
import time
from pathlib import Path

import structlog

from pdfingest.application.dto.ingest_dto import IngestResult
from pdfingest.application.ports import Chunker, TextExtractor, UploadStorage
from pdfingest.application.services.chunk_embedder import ChunkEmbedder
from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.domain.exceptions import ExtractionError, StorageError

logger = structlog.get_logger(__name__)


class IngestPdfUseCase:
    """Ingest uploaded PDF: extract, chunk, embed, store; always clean up the upload."""

    def __init__(
        self,
        upload_storage: UploadStorage,
        text_extractor: TextExtractor,
        chunker: Chunker,
        embedder: ChunkEmbedder,
        upserter: VectorUpserter,
    ) -> None:
        self._uploads = upload_storage
        self._extractor = text_extractor
        self._chunker = chunker
        self._embedder = embedder
        self._upserter = upserter

    async def execute(self, upload_path: Path, filename: str) -> IngestResult:
        """Run the pipeline for one uploaded file. Any stage error aborts the run."""
        started = time.perf_counter()
        log = logger.bind(filename=filename)
        log.info("ingest_started")
        try:
            data = await self._uploads.read(upload_path)
            text = await asyncio.to_thread(self._extractor.extract, data)
            log.info("ingest_text_extracted", characters=len(text))

            chunks = self._chunker.chunk(text, filename)
            log.info("ingest_text_chunked", chunks=len(chunks))
            if not chunks:
                raise ExtractionError("No text chunks created from PDF")

            embeddings = await self._embedder.generate_embeddings(chunks)
            log.info("ingest_embeddings_generated", embeddings=len(embeddings))

            vectors_upserted = await self._upserter.upsert(embeddings)
            if vectors_upserted < len(embeddings):
                raise StorageError(
                    f"Vector index acknowledged {vectors_upserted} of {len(embeddings)} vectors"
                )
            log.info("ingest_vectors_upserted", vectors=vectors_upserted)
        finally:
            await self._uploads.cleanup(upload_path)

        processing_time_ms = int((time.perf_counter() - started) * 1000)
        log.info("ingest_completed", processing_time_ms=processing_time_ms)
        return IngestResult(
            filename=filename,
            chunks_processed=len(chunks),
            vectors_upserted=vectors_upserted,
            processing_time_ms=processing_time_ms,
        )
