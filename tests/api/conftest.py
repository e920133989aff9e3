"""Fixtures for API tests."""

import falcon.asgi
import pytest
from falcon.testing import TestClient

from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.application.use_cases.document.ingest_pdf import IngestPdfUseCase
from pdfingest.infrastructure.uploads.disk_upload_storage import DiskUploadStorage
from pdfingest.interfaces.api.app import create_app

MAX_UPLOAD_BYTES = 1024


@pytest.fixture
def app(
    ingest_pdf: IngestPdfUseCase,
    upload_storage: DiskUploadStorage,
    upserter: VectorUpserter,
) -> falcon.asgi.App:
    """Falcon ASGI app wired to in-memory fakes, without the startup probe."""
    return create_app(
        ingest_pdf=ingest_pdf,
        upload_storage=upload_storage,
        upserter=upserter,
        max_upload_bytes=MAX_UPLOAD_BYTES,
        cors_origins=["*"],
        probe_storage_on_startup=False,
    )


@pytest.fixture
def client(app: falcon.asgi.App) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
