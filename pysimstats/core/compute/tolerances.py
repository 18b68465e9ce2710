"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different numeric paths:
- Exact arithmetic (moments, ranks, percentiles): machine precision
- Polynomial approximations (normal CDF): bounded by the published error
- Series approximations (Lanczos, continued fractions): near machine precision

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance for one numeric path."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form statistics computed in float64
EXACT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact_fp64',
    description='Closed-form float64 arithmetic',
)

# Abramowitz & Stegun 26.2.17 has absolute error below 7.5e-8
NORMAL_CDF_AS = ToleranceTier(
    rtol=0.0,
    atol=7.5e-8,
    name='normal_cdf_as',
    description='Abramowitz-Stegun normal CDF polynomial',
)

# Lanczos gamma and the incomplete beta continued fraction
SERIES_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='series_fp64',
    description='Lanczos / continued-fraction approximations',
)
