"""
Shapiro-Wilk normality test for small samples.

Two weightings are available:

'uniform' (default)
    Every order-statistic pair gets the weight 1/sqrt(n) instead of the
    tabulated coefficients a_i:

        W = (sum_{i < n//2} (z_(n-1-i) - z_(i)) / sqrt(n))^2 / sum z^2

    where z are the sorted values standardized by the sample mean and sd.
    The p-value comes from Royston's normalizing transform of log(1 - W)
    and is clamped to [0.001, 0.999]. This is an approximation and
    will not agree with published Shapiro-Wilk tables.

'royston'
    Tabulated coefficients and Royston's (1995) algorithm AS R94 through
    scipy.stats.shapiro. No clamping.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pysimstats.core.compute.special import normal_cdf


P_VALUE_FLOOR = 0.001
P_VALUE_CEILING = 0.999


def shapiro_wilk(
    ordered: NDArray,
    mean: float,
    sd: float,
    weights: str = 'uniform',
) -> tuple[float, float]:
    """
    Shapiro-Wilk W and p-value.

    Parameters
    ----------
    ordered : NDArray
        Ascending sample, n >= 3.
    mean, sd : float
        Sample mean and n-1 standard deviation.
    weights : str
        'uniform' or 'royston'.

    Returns
    -------
    (W, p_value)
    """
    if weights == 'royston':
        stat, p_value = sp_stats.shapiro(ordered)
        return float(stat), float(p_value)

    n = ordered.shape[0]
    if sd > 0:
        z = (ordered - mean) / sd
    else:
        z = np.zeros_like(ordered)

    half = n // 2
    weight = 1.0 / math.sqrt(n)
    numerator = float(np.sum(weight * (z[::-1][:half] - z[:half])))
    denominator = float(np.sum(z * z))

    w_stat = (numerator * numerator) / denominator if denominator > 0 else 1.0
    return w_stat, royston_p_value(w_stat, n)


def royston_p_value(w_stat: float, n: int) -> float:
    """
    Upper-tail p-value of W from Royston's log(1 - W) normal approximation.

        mu    = -1.5861 - 0.31082 ln n - 0.083751 (ln n)^2
        sigma = exp(-0.4803 - 0.082676 ln n + 0.0030302 (ln n)^2)
        p     = 1 - Phi((ln(1 - W) - mu) / sigma)

    Clamped to [0.001, 0.999]. W >= 1 maps to the ceiling.
    """
    ln_n = math.log(n)
    mu = -1.5861 - 0.31082 * ln_n - 0.083751 * ln_n ** 2
    sigma = math.exp(-0.4803 - 0.082676 * ln_n + 0.0030302 * ln_n ** 2)

    if w_stat >= 1.0:
        z = -math.inf
    else:
        z = (math.log1p(-w_stat) - mu) / sigma

    p_value = 1.0 - normal_cdf(z)
    return max(P_VALUE_FLOOR, min(P_VALUE_CEILING, p_value))
