"""
Use-case: split a document, embed its chunks and upsert them into a collection.
Depends only on Domain ports and entities; no infrastructure imports.

Every step gates the next. Compatibility and vector checks both run before the
first store mutation, so a rejected ingest never leaves a half-written collection.
"""

import logging
import uuid
from typing import Optional

from better_qdrant.application.services.compatibility_validator import (
    CompatibilityValidator,
    compatibility_error,
)
from better_qdrant.application.services.vector_data_validator import VectorDataValidator
from better_qdrant.domain.entities.collection import VectorPoint
from better_qdrant.domain.entities.embedding_config import EmbeddingProviderConfig
from better_qdrant.domain.entities.validation import CompatibilityAction, IngestResult
from better_qdrant.domain.exceptions import ValidationError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProviderFactory
from better_qdrant.domain.ports.text_splitter_port import ITextSplitter
from better_qdrant.domain.ports.vector_store_port import IVectorStore

logger = logging.getLogger(__name__)


class IngestDocumentUseCase:
    CHUNK_SIZE: int = 1000
    CHUNK_OVERLAP: int = 200

    def __init__(
        self,
        splitter: ITextSplitter,
        providers: IEmbeddingProviderFactory,
        vector_store: IVectorStore,
        data_validator: Optional[VectorDataValidator] = None,
    ) -> None:
        self._splitter = splitter
        self._providers = providers
        self._vector_store = vector_store
        self._compatibility = CompatibilityValidator(vector_store)
        self._data_validator = data_validator or VectorDataValidator()

    async def execute(
        self,
        content: str,
        collection: str,
        provider_config: EmbeddingProviderConfig,
        source: Optional[str] = None,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> IngestResult:
        """Ingest *content* into *collection*.

        Raises:
            ValidationError: on an incompatible collection or malformed vectors,
                             always before the store is touched.
            ConfigError, ProviderError, StoreError: propagated from the adapters.
        """
        chunks = self._splitter.split(
            content,
            source=source,
            chunk_size=chunk_size or self.CHUNK_SIZE,
            chunk_overlap=chunk_overlap if chunk_overlap is not None else self.CHUNK_OVERLAP,
        )
        logger.info("Split %s into %d chunks", source or "document", len(chunks))

        provider = await self._providers.build_and_ready(provider_config)

        verdict = await self._compatibility.check(collection, provider)
        if not verdict.valid:
            raise compatibility_error(verdict)

        texts = [chunk.text for chunk in chunks]
        vectors = await provider.generate(texts) if texts else []

        batch = self._data_validator.check_batch(vectors, provider.dimension)
        if not batch.valid:
            message = "Vector validation failed:\n" + "\n".join(batch.errors)
            if batch.warnings:
                message += "\n\nWarnings:\n" + "\n".join(batch.warnings)
            raise ValidationError(message, errors=batch.errors, warnings=batch.warnings)

        if verdict.action is CompatibilityAction.CREATE_COLLECTION:
            logger.info(
                "Creating collection %r with %d-dimensional vectors", collection, provider.dimension
            )
            await self._vector_store.create_collection(collection, provider.dimension)

        points = [
            VectorPoint(id=str(uuid.uuid4()), vector=vector, payload=chunk.payload())
            for chunk, vector in zip(chunks, vectors)
        ]
        await self._vector_store.upsert(collection, points)
        logger.info("Upserted %d points into %r", len(points), collection)

        return IngestResult(
            collection=collection,
            chunk_count=len(chunks),
            warnings=batch.warnings,
        )
