"""
Shared in-memory fakes for the domain ports.
"""

from typing import Optional

import pytest

from better_qdrant.domain.entities.collection import (
    CollectionDescriptor,
    SearchHit,
    VectorPoint,
)
from better_qdrant.domain.entities.document_chunk import TextChunk
from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
    ProviderCapabilities,
)
from better_qdrant.domain.exceptions import StoreError
from better_qdrant.domain.ports.embedding_provider_port import (
    IEmbeddingProvider,
    IEmbeddingProviderFactory,
)
from better_qdrant.domain.ports.text_splitter_port import ITextSplitter
from better_qdrant.domain.ports.vector_store_port import IVectorStore


class FakeVectorStore(IVectorStore):
    """Dict-backed store that records every call."""

    def __init__(self, collections: Optional[dict[str, int]] = None) -> None:
        self.collections: dict[str, int] = dict(collections or {})
        self.points: dict[str, list[VectorPoint]] = {}
        self.hits: list[SearchHit] = []
        self.calls: list[tuple] = []
        self.fail_on: Optional[str] = None
        self.info_missing = False

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, *args))
        if self.fail_on == operation:
            raise StoreError(operation, "backend unavailable")

    def called(self, operation: str) -> bool:
        return any(call[0] == operation for call in self.calls)

    async def list_collections(self) -> list[str]:
        self._record("list collections")
        return sorted(self.collections)

    async def create_collection(self, name: str, dimension: int) -> None:
        self._record("create collection", name, dimension)
        self.collections[name] = dimension

    async def delete_collection(self, name: str) -> None:
        self._record("delete collection", name)
        self.collections.pop(name, None)
        self.points.pop(name, None)

    async def upsert(self, collection: str, points: list[VectorPoint]) -> None:
        self._record("add documents", collection, points)
        self.points.setdefault(collection, []).extend(points)

    async def search(
        self, collection: str, vector: list[float], limit: int = 10
    ) -> list[SearchHit]:
        self._record("search collection", collection, vector, limit)
        return self.hits[:limit]

    async def get_collection_info(self, name: str) -> Optional[CollectionDescriptor]:
        self._record("get collection info", name)
        if self.info_missing or name not in self.collections:
            return None
        return CollectionDescriptor(name=name, dimension=self.collections[name])

    async def collection_exists(self, name: str) -> bool:
        self._record("check collection", name)
        return name in self.collections


class FakeProvider(IEmbeddingProvider):
    KIND = EmbeddingProviderKind.FASTEMBED
    CAPABILITIES = ProviderCapabilities(
        requires_credential=False,
        dynamic_dimension=False,
        default_model="fake",
        static_dimension=4,
    )

    def __init__(self, vectors: list[list[float]], dimension: int = 4) -> None:
        self._vectors = vectors
        self._dimension = dimension
        self.requests: list[list[str]] = []

    @property
    def dimension(self) -> int:
        return self._dimension

    async def generate(self, texts: list[str]) -> list[list[float]]:
        self.requests.append(list(texts))
        return [list(v) for v in self._vectors[: len(texts)]]


class FakeProviderFactory(IEmbeddingProviderFactory):
    def __init__(self, provider: IEmbeddingProvider) -> None:
        self.provider = provider
        self.configs: list[EmbeddingProviderConfig] = []

    def build(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        self.configs.append(config)
        return self.provider

    async def build_and_ready(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        return self.build(config)


class FixedSplitter(ITextSplitter):
    """Splits on blank lines so tests control the chunk count exactly."""

    def __init__(self) -> None:
        self.last_params: dict = {}

    def split(self, text, source=None, chunk_size=None, chunk_overlap=None):
        self.last_params = {"chunk_size": chunk_size, "chunk_overlap": chunk_overlap}
        parts = [part for part in text.split("\n\n") if part.strip()]
        return [TextChunk(text=part, index=i, source=source) for i, part in enumerate(parts)]


UNIT_VECTORS = [[0.0, 0.0, 0.0, 1.0], [0.0, 0.0, 1.0, 0.0], [0.0, 1.0, 0.0, 0.0]]


@pytest.fixture
def store() -> FakeVectorStore:
    return FakeVectorStore()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider(UNIT_VECTORS)


@pytest.fixture
def factory(provider) -> FakeProviderFactory:
    return FakeProviderFactory(provider)


@pytest.fixture
def splitter() -> FixedSplitter:
    return FixedSplitter()


@pytest.fixture
def fastembed_config() -> EmbeddingProviderConfig:
    return EmbeddingProviderConfig(kind=EmbeddingProviderKind.FASTEMBED)


@pytest.fixture
def make_provider():
    return FakeProvider
