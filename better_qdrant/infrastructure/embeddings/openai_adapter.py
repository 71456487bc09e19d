"""
Infrastructure adapters: OpenAI-compatible /embeddings APIs → IEmbeddingProvider.

OpenRouter speaks the same wire format as OpenAI and only differs in its
defaults and attribution headers.
"""

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderKind,
    ProviderCapabilities,
)
from better_qdrant.domain.exceptions import ProviderError
from better_qdrant.infrastructure.embeddings.http_provider import HTTPEmbeddingProvider, as_vector


class OpenAIEmbeddingProvider(HTTPEmbeddingProvider):
    """Remote embeddings from the OpenAI API (text-embedding-ada-002 by default)."""

    KIND = EmbeddingProviderKind.OPENAI
    LABEL = "OpenAI"
    CAPABILITIES = ProviderCapabilities(
        requires_credential=True,
        dynamic_dimension=False,
        default_model="text-embedding-ada-002",
        default_endpoint="https://api.openai.com/v1",
        static_dimension=1536,
    )

    @property
    def dimension(self) -> int:
        return self.CAPABILITIES.static_dimension

    async def generate(self, texts: list[str]) -> list[list[float]]:
        body = await self._post("/embeddings", {"input": texts, "model": self._model})

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise ProviderError(f"Invalid response from {self.LABEL} API", provider=self.name)

        # The API tags each item with the position of its input.
        if all(isinstance(item, dict) and isinstance(item.get("index"), int) for item in data):
            data = sorted(data, key=lambda item: item["index"])

        vectors = []
        for item in data:
            vector = as_vector(item.get("embedding")) if isinstance(item, dict) else None
            if vector is None:
                raise ProviderError(
                    f"Invalid embedding format in {self.LABEL} response", provider=self.name
                )
            vectors.append(vector)

        if len(vectors) != len(texts):
            raise ProviderError(
                f"{self.LABEL} returned {len(vectors)} embeddings for {len(texts)} inputs",
                provider=self.name,
            )
        return vectors


class OpenRouterEmbeddingProvider(OpenAIEmbeddingProvider):
    """OpenAI-compatible embeddings routed through OpenRouter."""

    KIND = EmbeddingProviderKind.OPENROUTER
    LABEL = "OpenRouter"
    CAPABILITIES = ProviderCapabilities(
        requires_credential=True,
        dynamic_dimension=False,
        default_model="openai/text-embedding-ada-002",
        default_endpoint="https://openrouter.ai/api/v1",
        static_dimension=1536,
    )

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        headers["HTTP-Referer"] = "https://github.com/wrediam/better-qdrant-mcp-server"
        headers["X-Title"] = "Better Qdrant"
        return headers
