"""Application ports - interfaces for external adapters."""

from pdfingest.application.ports.chunker import Chunker
from pdfingest.application.ports.embedding_provider import EmbeddingProvider
from pdfingest.application.ports.text_extractor import TextExtractor
from pdfingest.application.ports.upload_storage import UploadStorage
from pdfingest.application.ports.vector_store import VectorStore

__all__ = [
    "Chunker",
    "EmbeddingProvider",
    "TextExtractor",
    "UploadStorage",
    "VectorStore",
]
