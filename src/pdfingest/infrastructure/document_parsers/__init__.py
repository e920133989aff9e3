"""Document parsers: extract text from uploaded files."""

from pdfingest.infrastructure.document_parsers.base import ParseResult
from pdfingest.infrastructure.document_parsers.pdf_parser import (
    PdfTextExtractor,
    parse_pdf,
)

__all__ = ["ParseResult", "PdfTextExtractor", "parse_pdf"]
