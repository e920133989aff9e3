"""Application entry point and composition root."""

import structlog
from falcon.asgi import App

from pdfingest import __version__
from pdfingest.application.dto.chunking_config import ChunkingConfig
from pdfingest.application.services.chunk_embedder import ChunkEmbedder
from pdfingest.application.services.vector_upserter import VectorUpserter
from pdfingest.application.use_cases.document.ingest_pdf import IngestPdfUseCase
from pdfingest.config import Settings, get_settings
from pdfingest.infrastructure.chunking.recursive_chunker import RecursiveChunker
from pdfingest.infrastructure.document_parsers import PdfTextExtractor
from pdfingest.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from pdfingest.infrastructure.uploads.disk_upload_storage import DiskUploadStorage
from pdfingest.infrastructure.vector_store.pinecone_store import PineconeVectorStore
from pdfingest.interfaces.api.app import create_app
from pdfingest.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def create_pdfingest_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.embedding_api_url,
        api_key=settings.embedding_api_key,
        model=settings.embedding_model,
    )
    vector_store = PineconeVectorStore(
        api_key=settings.pinecone_api_key,
        index_name=settings.pinecone_index_name,
        namespace=settings.pinecone_namespace,
    )
    upload_storage = DiskUploadStorage(settings.upload_dir)

    embedder = ChunkEmbedder(
        embedding_provider,
        batch_size=settings.embedding_batch_size,
        max_attempts=settings.embedding_max_attempts,
        backoff_seconds=settings.embedding_backoff_seconds,
        batch_delay_seconds=settings.embedding_batch_delay_ms / 1000,
        expected_dimensions=settings.embedding_dimensions,
    )
    upserter = VectorUpserter(
        vector_store,
        batch_size=settings.storage_batch_size,
        batch_delay_seconds=settings.storage_batch_delay_ms / 1000,
    )
    chunker = RecursiveChunker(
        ChunkingConfig(chunk_size=settings.chunk_size, chunk_overlap=settings.chunk_overlap)
    )
    ingest_pdf = IngestPdfUseCase(
        upload_storage=upload_storage,
        text_extractor=PdfTextExtractor(),
        chunker=chunker,
        embedder=embedder,
        upserter=upserter,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        ingest_pdf=ingest_pdf,
        upload_storage=upload_storage,
        upserter=upserter,
        max_upload_bytes=settings.max_upload_bytes,
        cors_origins=cors_origins,
    )


def main() -> None:
    """CLI entry point - run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.json_logs)
    logger.info(
        "server_starting",
        version=__version__,
        host=settings.host,
        port=settings.port,
        index=settings.pinecone_index_name,
    )
    app = create_pdfingest_app(settings)
    # lifespan "on": a failed storage probe must abort startup
    uvicorn.run(app, host=settings.host, port=settings.port, lifespan="on", log_config=None)


if __name__ == "__main__":
    main()
