"""
Tests for compute_descriptives() and the DescriptiveSolution wrapper.

Reference values from numpy (mean, var(ddof=1), percentile linear).
"""

import numpy as np
import pytest

from pysimstats.descriptive import compute_descriptives, SampleDesign
from pysimstats.core.compute.tolerances import EXACT_FP64
from pysimstats.core.exceptions import EmptySampleError, ValidationError, DimensionError


# ═══════════════════════════════════════════════════════════════════════
# Basic statistics
# ═══════════════════════════════════════════════════════════════════════


class TestBasicStatistics:

    def test_one_to_five(self):
        result = compute_descriptives([1, 2, 3, 4, 5])
        assert result.n == 5
        assert result.mean == 3.0
        assert result.variance == pytest.approx(2.5)
        assert result.sd == pytest.approx(np.sqrt(2.5))
        assert result.standard_error == pytest.approx(np.sqrt(2.5) / np.sqrt(5))
        assert result.min == 1.0
        assert result.max == 5.0
        assert result.range == 4.0
        assert result.median == 3.0
        assert result.q1 == 2.0
        assert result.q3 == 4.0
        assert result.iqr == 2.0

    def test_matches_numpy(self, rng):
        x = rng.normal(10, 3, size=137)
        result = compute_descriptives(x)
        np.testing.assert_allclose(result.mean, np.mean(x), rtol=EXACT_FP64.rtol)
        np.testing.assert_allclose(result.variance, np.var(x, ddof=1), rtol=EXACT_FP64.rtol)
        np.testing.assert_allclose(result.median, np.median(x), rtol=EXACT_FP64.rtol)
        np.testing.assert_allclose(result.q1, np.percentile(x, 25), rtol=EXACT_FP64.rtol)
        np.testing.assert_allclose(result.q3, np.percentile(x, 75), rtol=EXACT_FP64.rtol)

    def test_even_median(self):
        assert compute_descriptives([4, 1, 3, 2]).median == 2.5

    def test_single_observation(self):
        result = compute_descriptives([7.0])
        assert result.mean == 7.0
        assert result.sd == 0.0
        assert result.median == 7.0
        assert result.q1 == result.q3 == 7.0


# ═══════════════════════════════════════════════════════════════════════
# Invariants
# ═══════════════════════════════════════════════════════════════════════


class TestInvariants:

    def test_constant_sample_exact(self):
        """Constant samples report the value exactly and zero spread."""
        result = compute_descriptives([0.1] * 7)
        assert result.mean == 0.1
        assert result.sd == 0.0
        assert result.variance == 0.0
        assert result.skewness == 0.0
        assert result.kurtosis == 0.0

    def test_quartile_ordering(self, rng):
        for size in (2, 3, 10, 51):
            r = compute_descriptives(rng.exponential(size=size))
            assert r.min <= r.q1 <= r.median <= r.q3 <= r.max

    def test_input_not_mutated(self):
        x = np.array([3.0, 1.0, 2.0])
        compute_descriptives(x)
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])

    def test_deterministic(self, rng):
        x = rng.standard_normal(40)
        assert compute_descriptives(x).to_dict() == compute_descriptives(x).to_dict()


# ═══════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════


class TestErrors:

    def test_empty(self):
        with pytest.raises(EmptySampleError):
            compute_descriptives([])

    def test_nan(self):
        with pytest.raises(ValidationError):
            compute_descriptives([1.0, np.nan])

    def test_2d(self):
        with pytest.raises(DimensionError):
            compute_descriptives([[1, 2], [3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# Solution wrapper
# ═══════════════════════════════════════════════════════════════════════


class TestSolution:

    def test_name_and_summary(self):
        result = compute_descriptives([1, 2, 3, 4, 5], name="age")
        assert result.name == "age"
        text = result.summary()
        assert "Descriptive Statistics: age" in text
        assert "Skewness" in text

    def test_to_dict_keys(self):
        keys = set(compute_descriptives([1, 2, 3]).to_dict())
        assert {"n", "mean", "sd", "median", "q1", "q3", "skewness", "kurtosis"} <= keys

    def test_accepts_design(self):
        design = SampleDesign.from_array([1, 2, 3], name="score")
        assert compute_descriptives(design).name == "score"

    def test_design_is_read_only(self):
        design = SampleDesign.from_array([1, 2, 3])
        with pytest.raises(ValueError):
            design.data[0] = 10.0

    def test_backend_metadata(self):
        result = compute_descriptives([1, 2, 3])
        assert result.backend_name == 'cpu_descriptive'
        assert result.info['ddof'] == 1
