"""
Port (interface) for vector stores.
Infrastructure adapters (e.g. QdrantVectorStore) must implement this interface.
Every method raises StoreError when the backing call fails.
"""

from abc import ABC, abstractmethod
from typing import Optional

from better_qdrant.domain.entities.collection import CollectionDescriptor, SearchHit, VectorPoint


class IVectorStore(ABC):
    @abstractmethod
    async def list_collections(self) -> list[str]:
        """Return the names of all collections."""
        ...

    @abstractmethod
    async def create_collection(self, name: str, dimension: int) -> None:
        """Create a cosine-distance collection holding *dimension*-long vectors."""
        ...

    @abstractmethod
    async def delete_collection(self, name: str) -> None: ...

    @abstractmethod
    async def upsert(self, collection: str, points: list[VectorPoint]) -> None:
        """Write *points* and return only once the store has persisted them."""
        ...

    @abstractmethod
    async def search(
        self, collection: str, vector: list[float], limit: int = 10
    ) -> list[SearchHit]:
        """Return the *limit* nearest points ordered by descending score."""
        ...

    @abstractmethod
    async def get_collection_info(self, name: str) -> Optional[CollectionDescriptor]:
        """Return the collection's vector configuration, or None if it does not exist."""
        ...

    @abstractmethod
    async def collection_exists(self, name: str) -> bool: ...
