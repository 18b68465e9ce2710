"""
Tests for the special functions in core/compute/special.py.

Reference values from scipy.stats.norm, scipy.special.gammaln,
scipy.special.betainc and scipy.stats.t.
"""

import math

import numpy as np
import pytest
from scipy import special, stats

from pysimstats.core.compute.special import (
    incomplete_beta,
    ln_gamma,
    normal_cdf,
    t_distribution_p_value,
)
from pysimstats.core.compute.tolerances import NORMAL_CDF_AS, SERIES_FP64
from pysimstats.core.exceptions import ValidationError


# ═══════════════════════════════════════════════════════════════════════
# normal_cdf
# ═══════════════════════════════════════════════════════════════════════


class TestNormalCdf:

    @pytest.mark.parametrize("z", [-4.0, -1.96, -0.5, 0.0, 0.3, 1.0, 1.644854, 3.2])
    def test_matches_scipy(self, z):
        np.testing.assert_allclose(
            normal_cdf(z), stats.norm.cdf(z),
            rtol=NORMAL_CDF_AS.rtol, atol=NORMAL_CDF_AS.atol,
        )

    def test_scalar_returns_float(self):
        assert isinstance(normal_cdf(0.5), float)

    def test_vectorized(self):
        z = np.linspace(-3, 3, 13)
        result = normal_cdf(z)
        assert result.shape == (13,)
        np.testing.assert_allclose(result, stats.norm.cdf(z), atol=NORMAL_CDF_AS.atol)

    def test_symmetry(self):
        for z in (0.1, 0.9, 2.5):
            assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0, abs=1e-7)

    def test_infinities(self):
        assert normal_cdf(math.inf) == 1.0
        assert normal_cdf(-math.inf) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# ln_gamma
# ═══════════════════════════════════════════════════════════════════════


class TestLnGamma:

    @pytest.mark.parametrize("x", [0.5, 1.0, 1.5, 2.0, 3.7, 10.0, 25.5])
    def test_matches_scipy(self, x):
        np.testing.assert_allclose(
            ln_gamma(x), special.gammaln(x), rtol=SERIES_FP64.rtol, atol=SERIES_FP64.atol
        )

    def test_factorial(self):
        """Gamma(5) = 4! = 24."""
        assert ln_gamma(5.0) == pytest.approx(math.log(24.0), rel=1e-9)

    @pytest.mark.parametrize("x", [0.0, -1.0, -2.5])
    def test_non_positive_is_inf(self, x):
        assert ln_gamma(x) == math.inf


# ═══════════════════════════════════════════════════════════════════════
# incomplete_beta
# ═══════════════════════════════════════════════════════════════════════


class TestIncompleteBeta:

    @pytest.mark.parametrize("x, a, b", [
        (0.1, 2.0, 3.0),
        (0.5, 0.5, 0.5),
        (0.3, 5.0, 0.5),
        (0.9, 1.5, 7.0),
        (0.75, 12.0, 0.5),
        (0.99, 20.0, 0.5),
    ])
    def test_matches_scipy(self, x, a, b):
        np.testing.assert_allclose(
            incomplete_beta(x, a, b), special.betainc(a, b, x),
            rtol=SERIES_FP64.rtol, atol=SERIES_FP64.atol,
        )

    def test_endpoints(self):
        assert incomplete_beta(0.0, 2.0, 3.0) == 0.0
        assert incomplete_beta(1.0, 2.0, 3.0) == 1.0

    def test_outside_unit_interval(self):
        assert incomplete_beta(-0.5, 2.0, 3.0) == 0.0
        assert incomplete_beta(1.5, 2.0, 3.0) == 1.0

    def test_symmetry_relation(self):
        """I_x(a, b) = 1 - I_{1-x}(b, a)."""
        assert incomplete_beta(0.3, 2.0, 4.0) == pytest.approx(
            1.0 - incomplete_beta(0.7, 4.0, 2.0), abs=1e-12
        )

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, -1.0)])
    def test_invalid_shape(self, a, b):
        with pytest.raises(ValidationError):
            incomplete_beta(0.5, a, b)


# ═══════════════════════════════════════════════════════════════════════
# t_distribution_p_value
# ═══════════════════════════════════════════════════════════════════════


class TestTDistributionPValue:

    @pytest.mark.parametrize("t, df", [(0.5, 3), (2.0, 10), (2.776, 4), (4.5, 28)])
    def test_is_two_tail_mass(self, t, df):
        """I_{df/(df+t^2)}(df/2, 1/2) equals P(|T| >= |t|)."""
        expected = 2.0 * stats.t.sf(abs(t), df)
        np.testing.assert_allclose(
            t_distribution_p_value(t, df), expected, rtol=1e-7
        )

    def test_sign_irrelevant(self):
        assert t_distribution_p_value(-2.0, 8) == t_distribution_p_value(2.0, 8)

    def test_zero_t(self):
        assert t_distribution_p_value(0.0, 5) == 1.0

    def test_invalid_df(self):
        with pytest.raises(ValidationError):
            t_distribution_p_value(1.0, 0)
