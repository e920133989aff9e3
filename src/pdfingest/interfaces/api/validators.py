"""Upload validation."""

from pathlib import PurePath

from pdfingest.domain.exceptions import UnsupportedFileType, ValidationError

PDF_MIME_TYPE = "application/pdf"


def validate_upload(filename: str | None, content_type: str | None) -> None:
    """Raise unless the upload looks like a PDF by both extension and MIME type."""
    if not filename:
        raise ValidationError("No file uploaded")
    if PurePath(filename).suffix.lower() != ".pdf":
        raise UnsupportedFileType("Only PDF files are allowed")
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime != PDF_MIME_TYPE:
        raise UnsupportedFileType(f"Invalid file type. Must be {PDF_MIME_TYPE}")
