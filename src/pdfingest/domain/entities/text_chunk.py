"""Text chunk entity - contiguous segment of normalized document text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextChunk:
    """Chunk of a document, positioned by its 0-based index."""

    text: str
    filename: str
    chunk_index: int
