"""
Infrastructure adapter: in-process FastEmbed ONNX model → IEmbeddingProvider.

fastembed is imported lazily inside the worker so the module can be loaded
without the ONNX runtime present; model download and inference run in a
worker thread to keep the event loop free.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Optional

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
    ProviderCapabilities,
)
from better_qdrant.domain.exceptions import ProviderError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProvider

logger = logging.getLogger(__name__)


def _load_text_embedding(model_name: str) -> Any:
    from fastembed import TextEmbedding

    return TextEmbedding(model_name=model_name)


class FastEmbedEmbeddingProvider(IEmbeddingProvider):
    """Runs a small sentence-embedding model locally; no network or API key needed."""

    KIND = EmbeddingProviderKind.FASTEMBED
    LABEL = "FastEmbed"
    CAPABILITIES = ProviderCapabilities(
        requires_credential=False,
        dynamic_dimension=False,
        default_model="BAAI/bge-small-en-v1.5",
        static_dimension=384,
    )

    def __init__(
        self,
        config: EmbeddingProviderConfig,
        model_loader: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self._model = config.model or self.CAPABILITIES.default_model
        self._model_loader = model_loader or _load_text_embedding
        self._embedder: Any = None

    @property
    def model(self) -> str:
        return self._model

    @property
    def dimension(self) -> int:
        return self.CAPABILITIES.static_dimension

    async def generate(self, texts: list[str]) -> list[list[float]]:
        try:
            vectors = await asyncio.to_thread(self._embed_sync, texts)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(f"FastEmbed embedding failed: {exc}", provider=self.name) from exc

        if len(vectors) != len(texts):
            raise ProviderError(
                f"FastEmbed returned {len(vectors)} embeddings for {len(texts)} inputs",
                provider=self.name,
            )
        return vectors

    def _embed_sync(self, texts: list[str]) -> list[list[float]]:
        if self._embedder is None:
            logger.info("Loading FastEmbed model %s", self._model)
            self._embedder = self._model_loader(self._model)
        return [[float(value) for value in vector] for vector in self._embedder.embed(texts)]
