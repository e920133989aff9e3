"""Ingestion DTOs."""

from dataclasses import dataclass


@dataclass
class IngestResult:
    """Outcome of one successful ingestion run."""

    filename: str
    chunks_processed: int
    vectors_upserted: int
    processing_time_ms: int
