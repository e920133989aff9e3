"""Pytest fixtures for pdfingest tests."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest

from pdfingest.application.services.chunk_embedder import ChunkEmbedder
from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.application.use_cases.document.ingest_pdf import IngestPdfUseCase
from pdfingest.domain.exceptions import ExtractionError
from pdfingest.infrastructure.chunking.recursive_chunker import RecursiveChunker
from pdfingest.infrastructure.uploads.disk_upload_storage import DiskUploadStorage

DIMENSIONS = 8


# --- Fakes ---


class FakeTextExtractor:
    """Returns fixed text; raises ExtractionError when text is empty."""

    def __init__(self, text: str = "Hello world. This is a PDF.") -> None:
        self.text = text
        self.calls: list[bytes] = []

    def extract(self, data: bytes) -> str:
        self.calls.append(data)
        if not self.text.strip():
            raise ExtractionError("PDF contains no extractable text")
        return self.text


class FakeEmbeddingProvider:
    """Deterministic vectors; tracks calls and peak concurrency."""

    def __init__(self, dimensions: int = DIMENSIONS, fail_times: int = 0) -> None:
        self.dimensions = dimensions
        self.fail_times = fail_times
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if self.fail_times > 0:
                self.fail_times -= 1
                raise RuntimeError("inference unavailable")
            return [float(len(text))] * self.dimensions
        finally:
            self.in_flight -= 1


class FakeVectorStore:
    """In-memory vector store recording each upsert batch."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.batches: list[list[dict[str, Any]]] = []

    @property
    def vectors(self) -> list[dict[str, Any]]:
        return [v for batch in self.batches for v in batch]

    async def upsert(self, vectors: list[dict[str, Any]]) -> int:
        if self.fail:
            raise ConnectionError("index unreachable")
        self.batches.append(list(vectors))
        return len(vectors)

    async def describe_stats(self) -> dict[str, Any]:
        if self.fail:
            raise ConnectionError("index unreachable")
        return {"index_name": "test-index", "dimension": DIMENSIONS, "total_vector_count": 0}


# --- Fixtures ---


@pytest.fixture
def text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor()


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def vector_store() -> FakeVectorStore:
    return FakeVectorStore()


@pytest.fixture
def upload_storage(tmp_path: Path) -> DiskUploadStorage:
    """Upload storage rooted in a per-test temporary directory."""
    return DiskUploadStorage(tmp_path / "uploads")


@pytest.fixture
def embedder(embedding_provider: FakeEmbeddingProvider) -> ChunkEmbedder:
    """ChunkEmbedder without backoff or batch pauses."""
    return ChunkEmbedder(
        embedding_provider,
        backoff_seconds=0,
        batch_delay_seconds=0,
        expected_dimensions=DIMENSIONS,
    )


@pytest.fixture
def upserter(vector_store: FakeVectorStore) -> VectorUpserter:
    return VectorUpserter(vector_store, batch_delay_seconds=0)


@pytest.fixture
def ingest_pdf(
    upload_storage: DiskUploadStorage,
    text_extractor: FakeTextExtractor,
    embedder: ChunkEmbedder,
    upserter: VectorUpserter,
) -> IngestPdfUseCase:
    """Ingest use case wired to in-memory fakes."""
    return IngestPdfUseCase(
        upload_storage=upload_storage,
        text_extractor=text_extractor,
        chunker=RecursiveChunker(),
        embedder=embedder,
        upserter=upserter,
    )
