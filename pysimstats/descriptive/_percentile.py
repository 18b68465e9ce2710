"""
Percentiles by linear interpolation between order statistics.

For an ascending sample x[0..n-1] and p in [0, 100]:

    index  = p / 100 * (n - 1)
    lower  = floor(index), upper = ceil(index), weight = index - lower
    result = x[lower] + weight * (x[upper] - x[lower])

This is Hyndman & Fan type 7 (the R and numpy default). The
interpolation is written as lower + weight * gap so that equal
neighbours return their value exactly and the result never leaves
[x[lower], x[upper]].
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import EmptySampleError, ValidationError


def percentile_sorted(x: NDArray, p: float) -> float:
    """
    Percentile of an already sorted sample.

    Parameters
    ----------
    x : NDArray
        1D ascending array with no NaN values. Not checked for order.
    p : float
        Percentile in [0, 100].

    Returns
    -------
    float
    """
    if not 0.0 <= p <= 100.0:
        raise ValidationError(f"Percentile must be in [0, 100], got {p}")

    n = len(x)
    if n == 0:
        raise EmptySampleError("percentile of an empty sample is undefined")

    index = (p / 100.0) * (n - 1)
    lower = int(math.floor(index))
    upper = int(math.ceil(index))

    if lower == upper:
        return float(x[lower])

    weight = index - lower
    lo = float(x[lower])
    hi = float(x[upper])
    return lo + weight * (hi - lo)


def median_sorted(x: NDArray) -> float:
    """
    Median of an already sorted sample by the even/odd split.

    Even n averages the two middle values as (a + b) / 2.
    """
    n = len(x)
    if n == 0:
        raise EmptySampleError("median of an empty sample is undefined")

    mid = n // 2
    if n % 2 == 0:
        return float((x[mid - 1] + x[mid]) / 2.0)
    return float(x[mid])
