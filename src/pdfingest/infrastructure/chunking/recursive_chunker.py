"""Recursive text chunker implementation."""

import re

import structlog

from pdfingest.application.dto.chunking_config import ChunkingConfig
from pdfingest.domain.entities import TextChunk

logger = structlog.get_logger(__name__)

# Characters searched on each side of the ideal cut
SEARCH_RADIUS = 200
# Sentence boundaries farther than this from the ideal cut are rejected
MAX_SENTENCE_DISTANCE = 300

_WHITESPACE = re.compile(r"\s+")
# ". ", "! ", "? ", ".\n", "!\n", "?\n"
_SENTENCE_END = re.compile(r"[.!?][ \n]")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def find_break_point(text: str, start: int, ideal_end: int) -> int:
    """
    Move ideal_end to the nearest natural boundary within SEARCH_RADIUS.

    Preference: sentence end, paragraph break, line break, space. Falls back
    to ideal_end itself (possibly mid-word) when none is found. The returned
    index is where the chunk is cut; boundary characters stay with the
    earlier chunk.
    """
    search_start = max(start, ideal_end - SEARCH_RADIUS)
    search_end = min(len(text), ideal_end + SEARCH_RADIUS)

    cuts = [
        m.end()
        for m in _SENTENCE_END.finditer(text, search_start, search_end)
        if m.start() <= ideal_end
    ]
    if cuts:
        best = min(cuts, key=lambda cut: abs(cut - ideal_end))
        if abs(best - ideal_end) < MAX_SENTENCE_DISTANCE:
            return best

    for separator in ("\n\n", "\n", " "):
        # Match must start at or before ideal_end and lie inside the window
        limit = min(search_end, ideal_end + len(separator))
        pos = text.rfind(separator, search_start, limit)
        if pos != -1:
            return pos + len(separator)

    return ideal_end


class RecursiveChunker:
    """Chunker splitting on sentence, paragraph, line and word boundaries."""

    def __init__(self, config: ChunkingConfig | None = None) -> None:
        self._config = config or ChunkingConfig()

    @property
    def config(self) -> ChunkingConfig:
        return self._config

    def chunk(self, text: str, filename: str) -> list[TextChunk]:
        """Split text into overlapping chunks. Empty input yields no chunks."""
        text = normalize_whitespace(text)
        if not text:
            return []

        chunk_size = self._config.chunk_size
        chunk_overlap = self._config.chunk_overlap
        length = len(text)
        chunks: list[TextChunk] = []
        start = 0
        while start < length:
            ideal_end = start + chunk_size
            if ideal_end >= length:
                end = length
            else:
                end = find_break_point(text, start, ideal_end)

            piece = text[start:end].strip()
            if piece:
                chunks.append(
                    TextChunk(text=piece, filename=filename, chunk_index=len(chunks))
                )

            if end >= length:
                break
            next_start = end - chunk_overlap
            if next_start <= start:
                next_start = end
            start = next_start

        logger.debug(
            "text_chunked",
            filename=filename,
            characters=length,
            chunks=len(chunks),
        )
        return chunks
