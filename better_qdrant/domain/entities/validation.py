"""
Domain entities for validation verdicts and ingestion results.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class CompatibilityAction(str, Enum):
    CREATE_COLLECTION = "create_collection"
    COMPATIBLE = "compatible"
    SIZE_MISMATCH = "size_mismatch"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationVerdict:
    valid: bool
    reason: str
    expected_dimension: int
    actual_dimension: Optional[int]
    action: CompatibilityAction
    remediation: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class VectorBatchVerdict:
    valid: bool
    errors: list[str]
    warnings: list[str]
    count: int
    expected_dimension: int


@dataclass(frozen=True)
class IngestResult:
    collection: str
    chunk_count: int
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EmbeddingServiceRecommendation:
    service: str
    model: str
    dimension: int
    use_case: str
    pros: list[str]
    cons: list[str]
