"""
Tests for QdrantVectorStore against a mocked AsyncQdrantClient
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest
from qdrant_client.http.exceptions import UnexpectedResponse
from qdrant_client.models import Distance, VectorParams

from better_qdrant.domain.entities.collection import DistanceMetric, VectorPoint
from better_qdrant.domain.exceptions import StoreError
from better_qdrant.infrastructure.vector_store.qdrant_store import QdrantVectorStore

POINT_ID = "6f1c2a9e-3b4d-4c1e-9f2a-7d8e5b6c4a31"


def _collection_info(vectors):
    return SimpleNamespace(config=SimpleNamespace(params=SimpleNamespace(vectors=vectors)))


@pytest.fixture
def client():
    return AsyncMock()


@pytest.fixture
def qdrant(client):
    return QdrantVectorStore(client)


class TestQdrantVectorStore:
    @pytest.mark.asyncio
    async def test_list_collections(self, qdrant, client):
        client.get_collections.return_value = SimpleNamespace(
            collections=[SimpleNamespace(name="docs"), SimpleNamespace(name="notes")]
        )

        assert await qdrant.list_collections() == ["docs", "notes"]

    @pytest.mark.asyncio
    async def test_create_collection_uses_cosine(self, qdrant, client):
        await qdrant.create_collection("docs", 384)

        client.create_collection.assert_awaited_once_with(
            collection_name="docs",
            vectors_config=VectorParams(size=384, distance=Distance.COSINE),
        )

    @pytest.mark.asyncio
    async def test_upsert_waits_for_completion(self, qdrant, client):
        point = VectorPoint(id=POINT_ID, vector=[0.1, 0.2], payload={"text": "a"})

        await qdrant.upsert("docs", [point])

        kwargs = client.upsert.await_args.kwargs
        assert kwargs["collection_name"] == "docs"
        assert kwargs["wait"] is True
        assert kwargs["points"][0].payload == {"text": "a"}

    @pytest.mark.asyncio
    async def test_search_orders_hits_by_score(self, qdrant, client):
        client.query_points.return_value = SimpleNamespace(
            points=[
                SimpleNamespace(id=1, score=0.2, payload={"text": "low"}),
                SimpleNamespace(id=2, score=0.9, payload={"text": "high"}),
                SimpleNamespace(id=3, score=0.5, payload=None),
            ]
        )

        hits = await qdrant.search("docs", [0.1, 0.2], limit=3)

        assert [hit.id for hit in hits] == ["2", "3", "1"]
        assert hits[1].payload == {}
        assert client.query_points.await_args.kwargs["limit"] == 3

    @pytest.mark.asyncio
    async def test_collection_info(self, qdrant, client):
        client.get_collection.return_value = _collection_info(
            VectorParams(size=768, distance=Distance.DOT)
        )

        info = await qdrant.get_collection_info("docs")

        assert info.dimension == 768
        assert info.distance is DistanceMetric.DOT

    @pytest.mark.asyncio
    async def test_collection_info_missing_collection(self, qdrant, client):
        client.get_collection.side_effect = UnexpectedResponse(
            status_code=404, reason_phrase="Not Found", content=b"", headers=httpx.Headers()
        )

        assert await qdrant.get_collection_info("ghost") is None

    @pytest.mark.asyncio
    async def test_collection_info_named_vectors_is_unknown(self, qdrant, client):
        client.get_collection.return_value = _collection_info(
            {"dense": VectorParams(size=4, distance=Distance.COSINE)}
        )

        assert await qdrant.get_collection_info("multi") is None

    @pytest.mark.asyncio
    async def test_collection_exists(self, qdrant, client):
        client.collection_exists.return_value = False

        assert await qdrant.collection_exists("ghost") is False

    @pytest.mark.asyncio
    async def test_failures_name_the_operation(self, qdrant, client):
        client.upsert.side_effect = RuntimeError("connection reset")

        with pytest.raises(StoreError) as excinfo:
            await qdrant.upsert("docs", [])

        assert str(excinfo.value) == "Failed to add documents: connection reset"
        assert excinfo.value.operation == "add documents"

    @pytest.mark.asyncio
    async def test_delete_failure(self, qdrant, client):
        client.delete_collection.side_effect = RuntimeError("timeout")

        with pytest.raises(StoreError, match="Failed to delete collection: timeout"):
            await qdrant.delete_collection("docs")
