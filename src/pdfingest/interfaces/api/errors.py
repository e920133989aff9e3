"""Error handlers - map domain exceptions to HTTP status and error labels."""

import falcon
import falcon.asgi
import structlog

from pdfingest.domain.exceptions import (
    EmbeddingError,
    ExtractionError,
    FileTooLarge,
    PdfIngestError,
    StorageError,
    UnsupportedFileType,
    ValidationError,
)

logger = structlog.get_logger(__name__)

# Most specific classes first
_ERROR_MAP: list[tuple[type[PdfIngestError], str, str]] = [
    (UnsupportedFileType, falcon.HTTP_400, "Invalid file type"),
    (FileTooLarge, falcon.HTTP_400, "File too large"),
    (ValidationError, falcon.HTTP_400, "Validation Error"),
    (ExtractionError, falcon.HTTP_422, "PDF Processing Error"),
    (EmbeddingError, falcon.HTTP_500, "Embedding Generation Error"),
    (StorageError, falcon.HTTP_500, "Vector Storage Error"),
]

INTERNAL_ERROR_LABEL = "Internal Server Error"


def error_status_and_label(ex: Exception) -> tuple[str, str]:
    """Return (HTTP status, error label) for an exception."""
    for cls, status, label in _ERROR_MAP:
        if isinstance(ex, cls):
            return status, label
    return falcon.HTTP_500, INTERNAL_ERROR_LABEL


def _error_body(label: str, message: str) -> dict:
    return {"success": False, "error": label, "message": message}


async def handle_ingest_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: PdfIngestError, params: dict
) -> None:
    """Render a pdfingest error."""
    status, label = error_status_and_label(ex)
    log = logger.warning if status == falcon.HTTP_400 else logger.error
    log("request_failed", path=req.path, error=label, message=str(ex))
    resp.status = status
    resp.media = _error_body(label, str(ex))


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    """Render any other exception as a generic 500."""
    logger.error("request_crashed", path=req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = _error_body(INTERNAL_ERROR_LABEL, str(ex) or "An unexpected error occurred")
