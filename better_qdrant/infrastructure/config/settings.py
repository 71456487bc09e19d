"""
Environment-driven configuration.

The composition root calls load_dotenv() first, so values may come from a .env
file as well as the process environment. Provider settings are resolved on every
tool call from <KIND>_API_KEY, <KIND>_ENDPOINT and <KIND>_MODEL.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
)
from better_qdrant.domain.exceptions import ConfigError

DEFAULT_QDRANT_URL = "http://localhost:6333"


@dataclass(frozen=True)
class QdrantSettings:
    url: str = DEFAULT_QDRANT_URL
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "QdrantSettings":
        env = os.environ if environ is None else environ
        return cls(
            url=env.get("QDRANT_URL") or DEFAULT_QDRANT_URL,
            api_key=env.get("QDRANT_API_KEY") or None,
        )


def embedding_config_from_env(
    service: str, environ: Optional[Mapping[str, str]] = None
) -> EmbeddingProviderConfig:
    """Build the provider config for *service* from the environment.

    Raises:
        ConfigError: if *service* is not a known provider kind.
    """
    try:
        kind = EmbeddingProviderKind(service)
    except ValueError as exc:
        raise ConfigError(f"Unknown embedding service type: {service}") from exc

    env = os.environ if environ is None else environ
    prefix = kind.value.upper()
    return EmbeddingProviderConfig(
        kind=kind,
        credential=env.get(f"{prefix}_API_KEY") or None,
        endpoint=env.get(f"{prefix}_ENDPOINT") or None,
        model=env.get(f"{prefix}_MODEL") or None,
    )


def log_level_from_env(environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    level = logging.getLevelName((env.get("LOG_LEVEL") or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
