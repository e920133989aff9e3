"""Embedding provider port - OpenAI compatible API."""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Port for generating a single text embedding."""

    async def embed(self, text: str) -> list[float]: ...
