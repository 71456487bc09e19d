"""
Use-case: semantic search over a collection.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import json
from typing import Optional

from better_qdrant.application.services.compatibility_validator import (
    CompatibilityValidator,
    compatibility_error,
)
from better_qdrant.application.services.vector_data_validator import VectorDataValidator
from better_qdrant.domain.entities.collection import SearchHit
from better_qdrant.domain.entities.embedding_config import EmbeddingProviderConfig
from better_qdrant.domain.entities.validation import CompatibilityAction
from better_qdrant.domain.exceptions import ValidationError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProviderFactory
from better_qdrant.domain.ports.vector_store_port import IVectorStore

NO_RESULTS = "No results found."


class SearchCollectionUseCase:
    DEFAULT_LIMIT: int = 10
    TEXT_FIELDS: tuple[str, ...] = ("text", "content")

    def __init__(
        self,
        providers: IEmbeddingProviderFactory,
        vector_store: IVectorStore,
        data_validator: Optional[VectorDataValidator] = None,
        text_fields: Optional[tuple[str, ...]] = None,
    ) -> None:
        self._providers = providers
        self._vector_store = vector_store
        self._compatibility = CompatibilityValidator(vector_store)
        self._data_validator = data_validator or VectorDataValidator()
        self._text_fields = text_fields or self.TEXT_FIELDS

    async def execute(
        self,
        query: str,
        collection: str,
        provider_config: EmbeddingProviderConfig,
        limit: Optional[int] = None,
    ) -> str:
        """Embed *query* and return the formatted nearest passages in *collection*.

        Returns:
            One block per hit in descending score order, or "No results found."
            when the collection is missing or the search returns nothing.

        Raises:
            ValidationError: on an incompatible collection or a malformed query vector.
        """
        provider = await self._providers.build_and_ready(provider_config)

        verdict = await self._compatibility.check(collection, provider)
        if not verdict.valid:
            raise compatibility_error(verdict)
        if verdict.action is CompatibilityAction.CREATE_COLLECTION:
            return NO_RESULTS

        vectors = await provider.generate([query])
        batch = self._data_validator.check_batch(vectors, provider.dimension)
        if not batch.valid:
            raise ValidationError(
                "Query vector validation failed: " + ", ".join(batch.errors),
                errors=batch.errors,
                warnings=batch.warnings,
            )

        hits = await self._vector_store.search(
            collection, vectors[0], limit=limit or self.DEFAULT_LIMIT
        )
        text = self.format_hits(hits) or NO_RESULTS
        if batch.warnings:
            text += "\nQuery vector warnings:\n" + "\n".join(batch.warnings)
        return text

    def format_hits(self, hits: list[SearchHit]) -> str:
        blocks = []
        for position, hit in enumerate(hits, start=1):
            block = f"Result {position} (Score: {hit.score:.2f}):\n{self._hit_text(hit)}\n"
            source = self._hit_source(hit)
            if source:
                block += f"Source: {source}\n"
            blocks.append(block + "\n")
        return "".join(blocks)

    def _hit_text(self, hit: SearchHit) -> str:
        for field in self._text_fields:
            value = hit.payload.get(field)
            if value:
                return str(value)
        return json.dumps(hit.payload, default=str)

    @staticmethod
    def _hit_source(hit: SearchHit) -> str:
        source = hit.payload.get("source")
        if not source:
            metadata = hit.payload.get("metadata")
            if isinstance(metadata, dict):
                source = metadata.get("source")
        return str(source) if source else ""
