"""
Tests for VectorDataValidator
"""

import math

from better_qdrant.application.services.vector_data_validator import VectorDataValidator


class TestVectorDataValidator:
    def setup_method(self):
        self.validator = VectorDataValidator()

    def test_well_formed_batch_is_valid(self):
        verdict = self.validator.check_batch([[0.1, 0.2, 0.3], [1, 2, 3]], 3)

        assert verdict.valid
        assert verdict.errors == []
        assert verdict.warnings == []
        assert verdict.count == 2
        assert verdict.expected_dimension == 3

    def test_empty_batch_is_an_error(self):
        verdict = self.validator.check_batch([], 3)

        assert not verdict.valid
        assert verdict.errors == ["No vectors provided"]

    def test_wrong_length_is_reported_with_index(self):
        verdict = self.validator.check_batch([[1.0, 2.0, 3.0], [1.0, 2.0]], 3)

        assert not verdict.valid
        assert verdict.errors == ["Vector at index 1 has size 2, expected 3"]

    def test_non_array_entries_are_rejected(self):
        verdict = self.validator.check_batch(["abc", 5, [1.0, 2.0]], 2)

        assert verdict.errors == [
            "Vector at index 0 is not an array",
            "Vector at index 1 is not an array",
        ]

    def test_non_numeric_values_are_counted(self):
        verdict = self.validator.check_batch([[1.0, None, "x", math.nan, True]], 5)

        assert not verdict.valid
        assert verdict.errors == ["Vector at index 0 contains 4 non-numeric values"]

    def test_errors_accumulate_across_the_batch(self):
        verdict = self.validator.check_batch([[1.0], [None, 2.0], "nope"], 2)

        assert len(verdict.errors) == 3

    def test_extreme_values_only_warn(self):
        verdict = self.validator.check_batch([[150.0, -250.0, 1.0]], 3)

        assert verdict.valid
        assert verdict.warnings == [
            "Vector at index 0 contains 2 values with absolute value > 100"
        ]

    def test_single_extreme_value_gives_one_warning(self):
        verdict = self.validator.check_batch([[0.1, 150.0, 0.2], [0.3, 0.4, 0.5]], 3)

        assert verdict.valid
        assert verdict.errors == []
        assert len(verdict.warnings) == 1
        assert "1 values" in verdict.warnings[0]

    def test_infinity_is_extreme_not_invalid(self):
        verdict = self.validator.check_batch([[math.inf, 0.0]], 2)

        assert verdict.valid
        assert len(verdict.warnings) == 1

    def test_threshold_is_configurable(self):
        verdict = VectorDataValidator(extreme_value_threshold=0.5).check_batch([[0.6, 0.4]], 2)

        assert verdict.warnings == [
            "Vector at index 0 contains 1 values with absolute value > 0.5"
        ]
