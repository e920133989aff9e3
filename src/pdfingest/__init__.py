"""pdfingest - PDF to vector index ingestion service."""

__version__ = "0.1.0"
