"""Vector store port - remote vector index."""

from typing import Any, Protocol


class VectorStore(Protocol):
    """Port for writing vectors into the index."""

    async def upsert(self, vectors: list[dict[str, Any]]) -> int:
        """Upsert {id, values, metadata} records. Returns acknowledged count."""
        ...

    async def describe_stats(self) -> dict[str, Any]:
        """Return index statistics (used as a connectivity probe)."""
        ...
