"""Text extractor port - raw text from document bytes."""

from typing import Protocol


class TextExtractor(Protocol):
    """Port for extracting text from an uploaded document."""

    def extract(self, data: bytes) -> str:
        """Return extracted text. Raises ExtractionError when there is none."""
        ...
