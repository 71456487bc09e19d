"""
Domain entities describing embedding providers.
Zero external dependencies: pure Python dataclasses and enums only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EmbeddingProviderKind(str, Enum):
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"
    FASTEMBED = "fastembed"


@dataclass(frozen=True)
class EmbeddingProviderConfig:
    kind: EmbeddingProviderKind
    credential: Optional[str] = None
    endpoint: Optional[str] = None
    model: Optional[str] = None


@dataclass(frozen=True)
class ProviderCapabilities:
    """Static facts about a provider variant, read before it is constructed.

    requires_credential: construction fails without an API key.
    dynamic_dimension:   the vector size is only known after probing the backend.
    static_dimension:    the vector size when it is known up front.
    """

    requires_credential: bool
    dynamic_dimension: bool
    default_model: str
    default_endpoint: Optional[str] = None
    static_dimension: Optional[int] = None


def dimension_cache_key(
    kind: EmbeddingProviderKind, endpoint: Optional[str], model: Optional[str]
) -> str:
    """Composite key under which a detected dimension is memoized."""
    return f"{kind.value}:{endpoint or ''}:{model or ''}"
