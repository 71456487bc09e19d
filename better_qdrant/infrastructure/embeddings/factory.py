"""
Embedding provider factory: EmbeddingProviderConfig → IEmbeddingProvider.

The set of variants is closed and keyed on EmbeddingProviderKind. Each variant's
ProviderCapabilities descriptor is checked before construction so a missing
credential fails fast with ConfigError.
"""

from typing import Optional

import httpx

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
)
from better_qdrant.domain.exceptions import ConfigError
from better_qdrant.domain.ports.embedding_provider_port import (
    IEmbeddingProvider,
    IEmbeddingProviderFactory,
)
from better_qdrant.infrastructure.embeddings.dimension_cache import (
    DEFAULT_DIMENSION_CACHE,
    DimensionCache,
)
from better_qdrant.infrastructure.embeddings.fastembed_adapter import FastEmbedEmbeddingProvider
from better_qdrant.infrastructure.embeddings.http_provider import HTTPEmbeddingProvider
from better_qdrant.infrastructure.embeddings.ollama_adapter import OllamaEmbeddingProvider
from better_qdrant.infrastructure.embeddings.openai_adapter import (
    OpenAIEmbeddingProvider,
    OpenRouterEmbeddingProvider,
)

PROVIDERS: dict[EmbeddingProviderKind, type[IEmbeddingProvider]] = {
    EmbeddingProviderKind.OPENAI: OpenAIEmbeddingProvider,
    EmbeddingProviderKind.OPENROUTER: OpenRouterEmbeddingProvider,
    EmbeddingProviderKind.OLLAMA: OllamaEmbeddingProvider,
    EmbeddingProviderKind.FASTEMBED: FastEmbedEmbeddingProvider,
}


class EmbeddingProviderFactory(IEmbeddingProviderFactory):
    def __init__(
        self,
        cache: Optional[DimensionCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            cache:       Dimension memo for dynamically sized providers. Defaults
                         to the process-wide cache.
            http_client: Optional shared client for HTTP providers; each call
                         opens its own client when omitted.
        """
        self._cache = cache if cache is not None else DEFAULT_DIMENSION_CACHE
        self._http_client = http_client

    def build(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        provider_cls = PROVIDERS.get(config.kind)
        if provider_cls is None:
            raise ConfigError(f"Unknown embedding service type: {config.kind}")

        caps = provider_cls.CAPABILITIES
        if caps.requires_credential and not config.credential:
            raise ConfigError(f"{provider_cls.LABEL} API key is required")

        kwargs = {}
        if issubclass(provider_cls, HTTPEmbeddingProvider):
            kwargs["client"] = self._http_client
        if caps.dynamic_dimension:
            kwargs["cache"] = self._cache
        return provider_cls(config, **kwargs)

    async def build_and_ready(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        provider = self.build(config)
        if provider.CAPABILITIES.dynamic_dimension:
            await provider.resolve_dimension()
        return provider
