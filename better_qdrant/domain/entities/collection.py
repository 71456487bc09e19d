"""
Domain entities for vector store collections, points and search hits.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DistanceMetric(str, Enum):
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    DOT = "dot"


@dataclass(frozen=True)
class CollectionDescriptor:
    name: str
    dimension: int
    distance: DistanceMetric = DistanceMetric.COSINE


@dataclass(frozen=True)
class VectorPoint:
    id: str
    vector: list[float]
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchHit:
    id: str
    score: float
    payload: dict[str, Any] = field(default_factory=dict)
