"""Domain entities."""

from pdfingest.domain.entities.embedding_result import EmbeddingResult
from pdfingest.domain.entities.text_chunk import TextChunk

__all__ = [
    "EmbeddingResult",
    "TextChunk",
]
