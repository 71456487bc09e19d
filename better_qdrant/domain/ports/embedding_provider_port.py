"""
Ports (interfaces) for embedding providers and the factory that builds them.
Infrastructure adapters (e.g. OllamaEmbeddingProvider) must implement these interfaces.
"""

from abc import ABC, abstractmethod

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
    ProviderCapabilities,
)


class IEmbeddingProvider(ABC):
    KIND: EmbeddingProviderKind
    LABEL: str = "Embedding"
    CAPABILITIES: ProviderCapabilities

    @property
    def name(self) -> str:
        return self.KIND.value

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector this provider returns.

        Raises:
            ProviderError: if the dimension has not been resolved yet.
        """
        ...

    @abstractmethod
    async def generate(self, texts: list[str]) -> list[list[float]]:
        """Embed *texts*, returning one vector per input in input order.

        Raises:
            ProviderError: on an unreachable backend or a malformed response.
        """
        ...

    async def resolve_dimension(self) -> int:
        """Make :attr:`dimension` available. Static providers already know it."""
        return self.dimension


class IEmbeddingProviderFactory(ABC):
    @abstractmethod
    def build(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        """Construct the provider variant for *config*.

        Raises:
            ConfigError: on an unknown kind or a missing required credential.
        """
        ...

    @abstractmethod
    async def build_and_ready(self, config: EmbeddingProviderConfig) -> IEmbeddingProvider:
        """Construct the provider and resolve its dimension if it is dynamic."""
        ...
