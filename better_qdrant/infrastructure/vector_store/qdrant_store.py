"""
Infrastructure adapter: Qdrant (async REST client) → IVectorStore.

All qdrant_client details are confined here. Every backing failure is wrapped in
StoreError naming the failed operation; nothing is retried.
"""

import logging
from typing import Optional

from qdrant_client import AsyncQdrantClient
from qdrant_client.http.exceptions import UnexpectedResponse
from qdrant_client.models import Distance, PointStruct, VectorParams

from better_qdrant.domain.entities.collection import (
    CollectionDescriptor,
    DistanceMetric,
    SearchHit,
    VectorPoint,
)
from better_qdrant.domain.exceptions import StoreError
from better_qdrant.domain.ports.vector_store_port import IVectorStore

logger = logging.getLogger(__name__)

_DISTANCES = {
    Distance.COSINE: DistanceMetric.COSINE,
    Distance.EUCLID: DistanceMetric.EUCLIDEAN,
    Distance.DOT: DistanceMetric.DOT,
}


class QdrantVectorStore(IVectorStore):
    """Collections, upserts and nearest-neighbour search against a Qdrant server."""

    def __init__(self, client: AsyncQdrantClient) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, api_key: Optional[str] = None) -> "QdrantVectorStore":
        logger.info("Connecting to Qdrant at: %s", url)
        return cls(AsyncQdrantClient(url=url, api_key=api_key))

    # ------------------------------------------------------------------
    # IVectorStore interface
    # ------------------------------------------------------------------

    async def list_collections(self) -> list[str]:
        try:
            response = await self._client.get_collections()
        except Exception as exc:
            raise self._failure("list collections", exc) from exc
        return [collection.name for collection in response.collections]

    async def create_collection(self, name: str, dimension: int) -> None:
        try:
            await self._client.create_collection(
                collection_name=name,
                vectors_config=VectorParams(size=dimension, distance=Distance.COSINE),
            )
        except Exception as exc:
            raise self._failure("create collection", exc) from exc
        logger.info("Created Qdrant collection %r (%d dims, cosine)", name, dimension)

    async def delete_collection(self, name: str) -> None:
        try:
            await self._client.delete_collection(collection_name=name)
        except Exception as exc:
            raise self._failure("delete collection", exc) from exc
        logger.info("Deleted Qdrant collection %r", name)

    async def upsert(self, collection: str, points: list[VectorPoint]) -> None:
        try:
            await self._client.upsert(
                collection_name=collection,
                points=[
                    PointStruct(id=point.id, vector=point.vector, payload=point.payload)
                    for point in points
                ],
                wait=True,
            )
        except Exception as exc:
            raise self._failure("add documents", exc) from exc

    async def search(
        self, collection: str, vector: list[float], limit: int = 10
    ) -> list[SearchHit]:
        try:
            response = await self._client.query_points(
                collection_name=collection,
                query=vector,
                limit=limit,
                with_payload=True,
                with_vectors=False,
            )
        except Exception as exc:
            raise self._failure("search collection", exc) from exc
        hits = [
            SearchHit(id=str(point.id), score=point.score, payload=dict(point.payload or {}))
            for point in response.points
        ]
        return sorted(hits, key=lambda hit: hit.score, reverse=True)

    async def get_collection_info(self, name: str) -> Optional[CollectionDescriptor]:
        try:
            info = await self._client.get_collection(collection_name=name)
        except UnexpectedResponse as exc:
            if exc.status_code == 404:
                return None
            raise self._failure("get collection info", exc) from exc
        except Exception as exc:
            raise self._failure("get collection info", exc) from exc

        vectors = info.config.params.vectors
        if not isinstance(vectors, VectorParams):
            logger.warning("Collection %r does not use a single unnamed vector", name)
            return None
        distance = _DISTANCES.get(vectors.distance)
        if distance is None:
            logger.warning("Collection %r uses unsupported distance %s", name, vectors.distance)
            return None
        return CollectionDescriptor(name=name, dimension=vectors.size, distance=distance)

    async def collection_exists(self, name: str) -> bool:
        try:
            return await self._client.collection_exists(collection_name=name)
        except Exception as exc:
            raise self._failure("check collection", exc) from exc

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _failure(operation: str, exc: Exception) -> StoreError:
        logger.error("Qdrant %s error: %s", operation, exc)
        return StoreError(operation, str(exc))
