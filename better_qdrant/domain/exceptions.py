"""
Domain exceptions shared by every layer.

Adapters translate SDK failures into these types; the tool registry is the
only place they are turned into user-facing text.
"""

from typing import Optional


class BetterQdrantError(Exception):
    """Base exception for all better-qdrant errors."""


class ConfigError(BetterQdrantError):
    """
    Bad or missing embedding provider configuration.

    Raised when:
    - The provider kind is not recognised
    - A provider that needs a credential is built without one
    """


class ProviderError(BetterQdrantError):
    """
    An embedding call or dimension probe failed.

    Raised when:
    - The backing service is unreachable or returns an error status
    - The response is malformed (missing field, wrong element type, wrong count)
    - A dynamically dimensioned provider is used before its dimension is resolved
    """

    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class StoreError(BetterQdrantError):
    """A vector store call failed. Carries the failing operation name."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Failed to {operation}: {message}")
        self.operation = operation
        self.detail = message


class ValidationError(BetterQdrantError):
    """
    A compatibility or vector-shape verdict was negative.

    The string form is the complete user-facing report: the headline message
    followed by suggested actions or accumulated errors and warnings.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[list[str]] = None,
        warnings: Optional[list[str]] = None,
        remediation: Optional[list[str]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])
        self.remediation = list(remediation or [])
