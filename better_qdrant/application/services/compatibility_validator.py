"""
Application service: decides whether a provider's vectors fit a collection.

The checks run in a fixed order (existence, metadata, dimension): a missing
collection is the normal first-write case and yields a create_collection
verdict rather than an error.
"""

import logging

from better_qdrant.domain.entities.validation import CompatibilityAction, ValidationVerdict
from better_qdrant.domain.exceptions import StoreError, ValidationError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProvider
from better_qdrant.domain.ports.vector_store_port import IVectorStore

logger = logging.getLogger(__name__)


class CompatibilityValidator:
    def __init__(self, vector_store: IVectorStore) -> None:
        self._vector_store = vector_store

    async def check(self, collection: str, provider: IEmbeddingProvider) -> ValidationVerdict:
        """Compare *provider*'s dimension against *collection*'s declared dimension."""
        expected = provider.dimension
        try:
            if not await self._vector_store.collection_exists(collection):
                return ValidationVerdict(
                    valid=True,
                    reason="Collection does not exist - will be created with correct dimensions",
                    expected_dimension=expected,
                    actual_dimension=None,
                    action=CompatibilityAction.CREATE_COLLECTION,
                )
            info = await self._vector_store.get_collection_info(collection)
        except StoreError as exc:
            logger.warning("Compatibility check for %r failed: %s", collection, exc)
            return ValidationVerdict(
                valid=False,
                reason=f"Validation failed: {exc}",
                expected_dimension=expected,
                actual_dimension=None,
                action=CompatibilityAction.ERROR,
            )

        if info is None:
            return ValidationVerdict(
                valid=False,
                reason="Could not retrieve collection information",
                expected_dimension=expected,
                actual_dimension=None,
                action=CompatibilityAction.ERROR,
            )

        if info.dimension != expected:
            return ValidationVerdict(
                valid=False,
                reason=(
                    f"Vector size mismatch: collection expects {info.dimension}, "
                    f"but embedding service produces {expected}"
                ),
                expected_dimension=expected,
                actual_dimension=info.dimension,
                action=CompatibilityAction.SIZE_MISMATCH,
                remediation=[
                    f"Use a different embedding service that produces {info.dimension}-dimensional vectors",
                    f"Create a new collection with {expected}-dimensional vectors",
                    "Delete and recreate the collection (WARNING: this will lose all data)",
                ],
            )

        return ValidationVerdict(
            valid=True,
            reason="Vector dimensions are compatible",
            expected_dimension=expected,
            actual_dimension=info.dimension,
            action=CompatibilityAction.COMPATIBLE,
        )


def compatibility_error(verdict: ValidationVerdict) -> ValidationError:
    """Build the user-facing error for a negative compatibility verdict."""
    message = f"Embedding compatibility error: {verdict.reason}"
    if verdict.remediation:
        message += "\n\nSuggested actions:\n" + "\n".join(
            f"- {action}" for action in verdict.remediation
        )
    return ValidationError(message, remediation=verdict.remediation)
