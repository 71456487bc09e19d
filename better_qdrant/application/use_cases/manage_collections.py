"""
Use-cases: list and delete vector store collections.
Depends only on Domain ports; no infrastructure imports.
"""

from better_qdrant.domain.ports.vector_store_port import IVectorStore


class ListCollectionsUseCase:
    def __init__(self, vector_store: IVectorStore) -> None:
        self._vector_store = vector_store

    async def execute(self) -> list[str]:
        return await self._vector_store.list_collections()


class DeleteCollectionUseCase:
    def __init__(self, vector_store: IVectorStore) -> None:
        self._vector_store = vector_store

    async def execute(self, collection: str) -> None:
        """Delete *collection* and every point in it.

        Raises:
            ValueError: if *collection* is blank or has surrounding whitespace.
            StoreError: propagated from the IVectorStore on failure.
        """
        if not collection or not collection.strip():
            raise ValueError("collection must be a non-empty string")
        if collection != collection.strip():
            raise ValueError(f"collection name has surrounding whitespace: {collection!r}")
        await self._vector_store.delete_collection(collection)
