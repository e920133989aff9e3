"""Chunker port - text splitting."""

from typing import Protocol

from pdfingest.domain.entities import TextChunk


class Chunker(Protocol):
    """Port for splitting document text into ordered, overlapping chunks."""

    def chunk(self, text: str, filename: str) -> list[TextChunk]: ...
