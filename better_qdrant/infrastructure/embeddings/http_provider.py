"""
Shared plumbing for embedding providers reached over HTTP.

All httpx details are confined here: request dispatch, status handling and the
translation of transport failures into ProviderError.
"""

import logging
from typing import Any, Optional

import httpx

from better_qdrant.domain.entities.embedding_config import EmbeddingProviderConfig
from better_qdrant.domain.exceptions import ConfigError, ProviderError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProvider

logger = logging.getLogger(__name__)

_HTTP_TIMEOUT = httpx.Timeout(60.0, connect=10.0)


def as_vector(value: Any) -> Optional[list[float]]:
    """Return *value* as a list of floats, or None if it is not a numeric array."""
    if not isinstance(value, list):
        return None
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        return None
    return [float(v) for v in value]


class HTTPEmbeddingProvider(IEmbeddingProvider):
    """Base class for providers backed by a JSON-over-HTTP embedding API."""

    def __init__(
        self,
        config: EmbeddingProviderConfig,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        caps = self.CAPABILITIES
        if caps.requires_credential and not config.credential:
            raise ConfigError(f"{self.LABEL} API key is required")
        self._api_key = config.credential
        self._endpoint = (config.endpoint or caps.default_endpoint or "").rstrip("/")
        if not self._endpoint:
            raise ConfigError(f"{self.LABEL} endpoint is required")
        self._model = config.model or caps.default_model
        self._client = client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def model(self) -> str:
        return self._model

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        url = f"{self._endpoint}{path}"
        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, headers=self._headers())
            else:
                async with httpx.AsyncClient(timeout=_HTTP_TIMEOUT) as client:
                    response = await client.post(url, json=payload, headers=self._headers())
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("%s API returned %s for %s", self.LABEL, exc.response.status_code, url)
            raise ProviderError(
                f"{self.LABEL} API request failed with status {exc.response.status_code}: "
                f"{exc.response.text}",
                provider=self.name,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("%s API unreachable at %s: %s", self.LABEL, url, exc)
            raise ProviderError(
                f"{self.LABEL} API request failed: {exc}", provider=self.name
            ) from exc
        except ValueError as exc:
            raise ProviderError(
                f"Invalid JSON in {self.LABEL} API response", provider=self.name
            ) from exc
