"""Chunking configuration DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Configuration for text chunking, in characters of normalized text."""

    chunk_size: int = 3000
    chunk_overlap: int = 300

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must be non-negative, got {self.chunk_overlap}")
