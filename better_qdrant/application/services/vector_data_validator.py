"""
Application service: shape and value sanity checks for a batch of vectors.

Runs before anything is persisted. Hard errors accumulate over the whole batch
so one pass reports every problem; large magnitudes are only warnings.
"""

import math
from collections.abc import Sequence
from typing import Any

from better_qdrant.domain.entities.validation import VectorBatchVerdict

DEFAULT_EXTREME_VALUE_THRESHOLD = 100.0


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


class VectorDataValidator:
    def __init__(self, extreme_value_threshold: float = DEFAULT_EXTREME_VALUE_THRESHOLD) -> None:
        self._threshold = extreme_value_threshold

    def check_batch(self, vectors: Sequence[Any], expected_dimension: int) -> VectorBatchVerdict:
        errors: list[str] = []
        warnings: list[str] = []

        if len(vectors) == 0:
            errors.append("No vectors provided")

        for index, vector in enumerate(vectors):
            if isinstance(vector, (str, bytes)) or not isinstance(vector, Sequence):
                errors.append(f"Vector at index {index} is not an array")
                continue

            if len(vector) != expected_dimension:
                errors.append(
                    f"Vector at index {index} has size {len(vector)}, expected {expected_dimension}"
                )

            numbers = [value for value in vector if _is_number(value)]
            non_numeric = len(vector) - len(numbers)
            if non_numeric:
                errors.append(f"Vector at index {index} contains {non_numeric} non-numeric values")

            extreme = sum(1 for value in numbers if abs(value) > self._threshold)
            if extreme:
                warnings.append(
                    f"Vector at index {index} contains {extreme} values "
                    f"with absolute value > {self._threshold:g}"
                )

        return VectorBatchVerdict(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            count=len(vectors),
            expected_dimension=expected_dimension,
        )
