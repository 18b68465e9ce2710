"""
Correlation coefficients and their p-values.

Pearson uses the t statistic t = r * sqrt((n-2) / (1-r^2)) with n-2
degrees of freedom. Spearman is Pearson on tie-averaged ranks; from
n = 11 upward its p-value uses the normal approximation z = rho*sqrt(n-1).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.stats import rankdata

from pysimstats.core.compute.special import normal_cdf, t_distribution_p_value
from pysimstats.correlation._common import Sidedness


def pearson_coefficient(x: NDArray, y: NDArray) -> tuple[float, bool]:
    """
    Pearson r and whether it was forced to 0 by a constant sample.

    r = cov(x, y) / (sd_x * sd_y), evaluated as
    sum(u * v) / sqrt(sum(u^2) * sum(v^2)) on the deviations scaled to a
    maximum magnitude of 1. r is scale-invariant, the sums stay in range
    for any finite input, and exactly linear data give exactly +-1.
    Clipped to [-1, 1] against rounding.
    """
    if np.all(x == x[0]) or np.all(y == y[0]):
        return 0.0, True

    dx = x - x.mean()
    dy = y - y.mean()
    u = dx / np.max(np.abs(dx))
    v = dy / np.max(np.abs(dy))
    ss_u = float(np.sum(u * u))
    ss_v = float(np.sum(v * v))

    r = float(np.sum(u * v)) / float(np.sqrt(ss_u * ss_v))
    return float(np.clip(r, -1.0, 1.0)), False


def spearman_coefficient(x: NDArray, y: NDArray) -> tuple[float, bool]:
    """Spearman rho: the Pearson coefficient of the tie-averaged ranks."""
    return pearson_coefficient(
        rankdata(x, method='average').astype(np.float64),
        rankdata(y, method='average').astype(np.float64),
    )


def pearson_p_value(r: float, n: int, sidedness: Sidedness) -> float:
    """
    p-value for a Pearson coefficient from n pairs.

    |r| >= 1 has no finite t; the p-value is then 0 for a non-zero r.
    """
    if abs(r) >= 1.0:
        return 0.0 if r != 0 else 1.0

    df = n - 2
    t = r * np.sqrt(df / (1.0 - r * r))
    p = t_distribution_p_value(abs(float(t)), df)
    if sidedness is Sidedness.TWO_SIDED:
        p *= 2.0
    return min(1.0, p)


def spearman_p_value(
    rho: float,
    n: int,
    sidedness: Sidedness,
    normal_min_n: int = 11,
) -> float:
    """p-value for a Spearman coefficient; t formula below normal_min_n."""
    if n < normal_min_n:
        return pearson_p_value(rho, n, sidedness)

    z = rho * np.sqrt(n - 1.0)
    p = 1.0 - normal_cdf(abs(float(z)))
    if sidedness is Sidedness.TWO_SIDED:
        p *= 2.0
    return min(1.0, float(p))
