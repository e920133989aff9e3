"""Domain exceptions."""


class PdfIngestError(Exception):
    """Base exception for pdfingest."""

    pass


class ValidationError(PdfIngestError):
    """Uploaded file is missing or not acceptable."""

    pass


class UnsupportedFileType(ValidationError):
    """Uploaded file is not a PDF (by extension or MIME type)."""

    pass


class FileTooLarge(ValidationError):
    """Uploaded file exceeds the configured size limit."""

    pass


class ExtractionError(PdfIngestError):
    """PDF is malformed or has no extractable text."""

    pass


class EmbeddingError(PdfIngestError):
    """Embedding call exhausted retries or returned an unexpected shape."""

    pass


class StorageError(PdfIngestError):
    """Vector index write or connectivity failure."""

    pass
