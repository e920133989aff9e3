"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from pdfingest.application.ports import UploadStorage
from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.application.use_cases.document.ingest_pdf import IngestPdfUseCase
from pdfingest.domain.exceptions import PdfIngestError
from pdfingest.interfaces.api.errors import handle_ingest_error, handle_unexpected_error
from pdfingest.interfaces.api.middleware.cors import CORSMiddleware
from pdfingest.interfaces.api.middleware.storage_probe import StorageProbeMiddleware
from pdfingest.interfaces.api.resources.health import HealthResource
from pdfingest.interfaces.api.resources.upload import UploadResource


def create_app(
    ingest_pdf: IngestPdfUseCase,
    upload_storage: UploadStorage,
    upserter: VectorUpserter,
    max_upload_bytes: int,
    cors_origins: list[str],
    probe_storage_on_startup: bool = True,
) -> App:
    """Create Falcon ASGI app with routes, middleware and error handlers."""
    middleware: list[object] = [CORSMiddleware(cors_origins)]
    if probe_storage_on_startup:
        middleware.append(StorageProbeMiddleware(upserter))
    app = falcon.asgi.App(middleware=middleware)

    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(PdfIngestError, handle_ingest_error)

    health_resource = HealthResource(upserter)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    app.add_route(
        "/api/upload",
        UploadResource(ingest_pdf, upload_storage, max_upload_bytes),
    )
    return app
