"""Embedding result entity - vector ready for the index."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EmbeddingResult:
    """Embedding of exactly one TextChunk, with the metadata stored alongside it."""

    id: str
    values: list[float]
    filename: str
    chunk_index: int
    text: str
    timestamp: str

    def metadata(self) -> dict[str, Any]:
        """Metadata as stored in the vector index."""
        return {
            "filename": self.filename,
            "chunkIndex": self.chunk_index,
            "text": self.text,
            "timestamp": self.timestamp,
        }
