"""Unit tests for PineconeVectorStore with a mocked Pinecone client."""

from unittest.mock import MagicMock

import pytest

from pdfingest.infrastructure.vector_store.pinecone_store import PineconeVectorStore


def _store(namespace: str = "") -> tuple[MagicMock, MagicMock, PineconeVectorStore]:
    client = MagicMock()
    index = MagicMock()
    client.Index.return_value = index
    store = PineconeVectorStore(
        api_key="test-key", index_name="pdf-index", namespace=namespace, _client=client
    )
    return client, index, store


def test_store_opens_named_index() -> None:
    client, _, store = _store()
    client.Index.assert_called_once_with("pdf-index")
    assert store.index_name == "pdf-index"


@pytest.mark.asyncio
async def test_upsert_returns_upserted_count() -> None:
    _, index, store = _store()
    index.upsert.return_value = MagicMock(upserted_count=2)
    vectors = [
        {"id": "a", "values": [0.1], "metadata": {"text": "x"}},
        {"id": "b", "values": [0.2], "metadata": {"text": "y"}},
    ]
    assert await store.upsert(vectors) == 2
    index.upsert.assert_called_once_with(vectors=vectors)


@pytest.mark.asyncio
async def test_upsert_uses_namespace_when_set() -> None:
    _, index, store = _store(namespace="docs")
    index.upsert.return_value = MagicMock(upserted_count=1)
    vectors = [{"id": "a", "values": [0.1], "metadata": {}}]
    await store.upsert(vectors)
    index.upsert.assert_called_once_with(vectors=vectors, namespace="docs")


@pytest.mark.asyncio
async def test_upsert_without_count_falls_back_to_batch_size() -> None:
    _, index, store = _store()
    index.upsert.return_value = None
    assert await store.upsert([{"id": "a", "values": [0.1], "metadata": {}}]) == 1


@pytest.mark.asyncio
async def test_upsert_empty_skips_call() -> None:
    _, index, store = _store()
    assert await store.upsert([]) == 0
    index.upsert.assert_not_called()


@pytest.mark.asyncio
async def test_upsert_propagates_errors() -> None:
    _, index, store = _store()
    index.upsert.side_effect = RuntimeError("401 unauthorized")
    with pytest.raises(RuntimeError, match="unauthorized"):
        await store.upsert([{"id": "a", "values": [0.1], "metadata": {}}])


@pytest.mark.asyncio
async def test_describe_stats() -> None:
    _, index, store = _store()
    index.describe_index_stats.return_value = MagicMock(dimension=1024, total_vector_count=42)
    assert await store.describe_stats() == {
        "index_name": "pdf-index",
        "dimension": 1024,
        "total_vector_count": 42,
    }
