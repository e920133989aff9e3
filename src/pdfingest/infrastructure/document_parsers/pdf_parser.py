"""Parser for PDF."""

import io

import structlog
from pypdf import PdfReader

from pdfingest.domain.exceptions import ExtractionError
from pdfingest.infrastructure.document_parsers.base import ParseResult

logger = structlog.get_logger(__name__)


def parse_pdf(data: bytes) -> ParseResult:
    """Extract text from PDF bytes, pages separated by blank lines."""
    try:
        reader = PdfReader(io.BytesIO(data))
        parts: list[str] = []
        for page in reader.pages:
            t = page.extract_text()
            if t:
                parts.append(t)
    except Exception as e:
        raise ExtractionError(f"Failed to extract text from PDF: {e}") from e
    text = "\n\n".join(parts)
    if not text.strip():
        raise ExtractionError("PDF contains no extractable text")
    return ParseResult(text=text, page_count=len(reader.pages))


class PdfTextExtractor:
    """TextExtractor backed by pypdf."""

    def extract(self, data: bytes) -> str:
        """Return the document text. Raises ExtractionError."""
        result = parse_pdf(data)
        logger.info(
            "pdf_text_extracted",
            pages=result.page_count,
            characters=len(result.text),
        )
        return result.text
