"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_not_empty / check_min_samples: sample counts
    - check_consistent_length: paired lengths
    - check_sample: the combined sample check
"""

import numpy as np
import pytest

from pysimstats.core.exceptions import (
    DimensionError,
    EmptySampleError,
    InsufficientDataError,
    LengthMismatchError,
    ValidationError,
)
from pysimstats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_not_empty,
    check_sample,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int32_promoted(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_empty_list_allowed(self):
        assert check_array([], "x").shape == (0,)

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_none_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1.0, None, 3.0], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 2.0]), "x")


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")


# ═══════════════════════════════════════════════════════════════════════
# Sample counts
# ═══════════════════════════════════════════════════════════════════════


class TestSampleCounts:

    def test_not_empty(self):
        with pytest.raises(EmptySampleError) as info:
            check_not_empty(np.array([]), "age")
        assert info.value.name == "age"

    def test_min_samples(self):
        with pytest.raises(InsufficientDataError) as info:
            check_min_samples(np.array([1.0, 2.0]), 3, "x")
        assert info.value.n == 2
        assert info.value.required == 3

    def test_min_samples_exact_passes(self):
        check_min_samples(np.array([1.0, 2.0, 3.0]), 3, "x")


class TestConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_mismatch(self):
        with pytest.raises(LengthMismatchError) as info:
            check_consistent_length(np.zeros(3), np.ones(4), names=("x", "y"))
        assert info.value.lengths == {"x": 3, "y": 4}

    def test_names_count_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))


class TestCheckSample:

    def test_returns_float64_copyable(self):
        arr = check_sample([3, 1, 2], "x")
        assert arr.dtype == np.float64
        assert arr.ndim == 1

    def test_rejects_nan(self):
        with pytest.raises(ValidationError):
            check_sample([1.0, float("nan")], "x")
