"""Upload API resource."""

import falcon
import falcon.asgi

from pdfingest.application.dto.ingest_dto import IngestResult
from pdfingest.application.ports import UploadStorage
from pdfingest.application.use_cases.document.ingest_pdf import IngestPdfUseCase
from pdfingest.domain.exceptions import FileTooLarge, ValidationError
from pdfingest.interfaces.api.validators import validate_upload

FILE_FIELD = "file"


def _part_filename(part: object) -> str:
    """Filename of a multipart part (plain or RFC 5987 filename*), or "" when none was sent."""
    return (getattr(part, "filename", None) or "").strip()


def _result_to_dict(r: IngestResult) -> dict:
    return {
        "filename": r.filename,
        "chunksProcessed": r.chunks_processed,
        "vectorsUpserted": r.vectors_upserted,
        "processingTimeMs": r.processing_time_ms,
    }


class UploadResource:
    """POST /api/upload - ingest one PDF sent as multipart field "file"."""

    def __init__(
        self,
        ingest_pdf: IngestPdfUseCase,
        upload_storage: UploadStorage,
        max_upload_bytes: int,
    ) -> None:
        self._ingest_pdf = ingest_pdf
        self._uploads = upload_storage
        self._max_upload_bytes = max_upload_bytes

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Validate and store the upload, then run the ingestion pipeline."""
        if "multipart/form-data" not in (req.content_type or ""):
            raise ValidationError("multipart/form-data required")

        try:
            data, filename = await self._read_file(req)
        except falcon.MediaMalformedError as e:
            raise ValidationError(f"Invalid multipart: {e.description or e.title}") from e

        path = await self._uploads.save(data, filename)
        result = await self._ingest_pdf.execute(path, filename)
        resp.media = {
            "success": True,
            "message": "PDF processed successfully",
            "data": _result_to_dict(result),
        }
        resp.status = falcon.HTTP_200

    async def _read_file(self, req: falcon.asgi.Request) -> tuple[bytes, str]:
        form = await req.get_media()
        async for part in form:
            if (part.name or "").strip() != FILE_FIELD:
                continue
            filename = _part_filename(part)
            validate_upload(filename, part.content_type)
            data = await part.stream.read(self._max_upload_bytes + 1)
            if len(data) > self._max_upload_bytes:
                limit_mb = self._max_upload_bytes / (1024 * 1024)
                raise FileTooLarge(f"Maximum file size is {limit_mb:g}MB")
            if not data:
                raise ValidationError("Uploaded file is empty")
            return bytes(data), filename
        raise ValidationError("No file uploaded")
