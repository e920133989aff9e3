"""OpenAI-compatible embedding provider."""

from numbers import Real

from openai import AsyncOpenAI

from pdfingest.domain.exceptions import EmbeddingError


class OpenAIEmbeddingProvider:
    """Embedding provider using an OpenAI-compatible API (e.g. Text Embeddings Inference)."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._client = client or AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def embed(self, text: str) -> list[float]:
        """Generate the embedding for one text."""
        response = await self._client.embeddings.create(
            model=self._model,
            input=text,
        )
        if not response.data:
            raise EmbeddingError("Unexpected embedding format: empty response")
        embedding = response.data[0].embedding
        if not isinstance(embedding, list) or not all(
            isinstance(v, Real) for v in embedding
        ):
            raise EmbeddingError("Unexpected embedding format")
        return [float(v) for v in embedding]
