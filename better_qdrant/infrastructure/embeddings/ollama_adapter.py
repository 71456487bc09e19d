"""
Infrastructure adapter: Ollama /api/embed → IEmbeddingProvider.

The vector size depends on whichever model the local Ollama serves, so it is
detected by embedding a sentinel input once per (endpoint, model) and memoized
in a DimensionCache shared across the process.
"""

import logging
from typing import Optional

import httpx

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
    ProviderCapabilities,
    dimension_cache_key,
)
from better_qdrant.domain.exceptions import ProviderError
from better_qdrant.infrastructure.embeddings.dimension_cache import (
    DEFAULT_DIMENSION_CACHE,
    DimensionCache,
)
from better_qdrant.infrastructure.embeddings.http_provider import HTTPEmbeddingProvider, as_vector

logger = logging.getLogger(__name__)

_PROBE_INPUT = "test"


class OllamaEmbeddingProvider(HTTPEmbeddingProvider):
    """Local embeddings from an Ollama server, batched through /api/embed."""

    KIND = EmbeddingProviderKind.OLLAMA
    LABEL = "Ollama"
    CAPABILITIES = ProviderCapabilities(
        requires_credential=False,
        dynamic_dimension=True,
        default_model="nomic-embed-text",
        default_endpoint="http://host.docker.internal:11434",
    )

    def __init__(
        self,
        config: EmbeddingProviderConfig,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[DimensionCache] = None,
    ) -> None:
        super().__init__(config, client)
        self._cache = cache if cache is not None else DEFAULT_DIMENSION_CACHE
        self._dimension: Optional[int] = None

    @property
    def cache_key(self) -> str:
        return dimension_cache_key(self.KIND, self._endpoint, self._model)

    @property
    def dimension(self) -> int:
        if self._dimension is None:
            raise ProviderError(
                "Vector size not initialized. Call resolve_dimension() first.",
                provider=self.name,
            )
        return self._dimension

    async def resolve_dimension(self) -> int:
        if self._dimension is None:
            self._dimension = await self._cache.resolve(self.cache_key, self._probe_dimension)
        return self._dimension

    async def generate(self, texts: list[str]) -> list[list[float]]:
        expected = self.dimension
        vectors = await self._embed(texts)
        for index, vector in enumerate(vectors):
            if len(vector) != expected:
                raise ProviderError(
                    f"Dimension mismatch at index {index}: expected {expected}, got {len(vector)}",
                    provider=self.name,
                )
        if len(vectors) != len(texts):
            raise ProviderError(
                f"Ollama returned {len(vectors)} embeddings for {len(texts)} inputs",
                provider=self.name,
            )
        return vectors

    async def _probe_dimension(self) -> int:
        try:
            vectors = await self._embed([_PROBE_INPUT])
            if not vectors or not vectors[0]:
                raise ProviderError(
                    "Invalid response from Ollama API during dimension detection",
                    provider=self.name,
                )
        except ProviderError as exc:
            raise ProviderError(
                f"Failed to detect vector dimensions for model {self._model}: {exc}",
                provider=self.name,
            ) from exc

        dimension = len(vectors[0])
        logger.info("Detected %d dimensions for model: %s", dimension, self._model)
        return dimension

    async def _embed(self, texts: list[str]) -> list[list[float]]:
        body = await self._post("/api/embed", {"model": self._model, "input": texts})

        embeddings = body.get("embeddings") if isinstance(body, dict) else None
        if not isinstance(embeddings, list):
            raise ProviderError("Invalid response from Ollama API", provider=self.name)

        vectors = []
        for index, embedding in enumerate(embeddings):
            vector = as_vector(embedding)
            if vector is None:
                raise ProviderError(
                    f"Invalid embedding format at index {index} in Ollama response",
                    provider=self.name,
                )
            vectors.append(vector)
        return vectors
