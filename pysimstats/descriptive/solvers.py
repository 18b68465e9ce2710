"""
Solver dispatch for descriptive statistics.

Provides compute_descriptives() as the comprehensive entry point, plus
the building blocks the other domains reuse: percentile(), covariance()
and convert_to_ranks().
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import rankdata

from pysimstats.core.validation import (
    check_sample,
    check_not_empty,
    check_consistent_length,
    check_min_samples,
)
from pysimstats.descriptive.design import SampleDesign
from pysimstats.descriptive.solution import DescriptiveSolution
from pysimstats.descriptive.backends.cpu import CPUDescriptiveBackend
from pysimstats.descriptive._percentile import percentile_sorted


def _ensure_design(data: ArrayLike | SampleDesign, name: str = 'x') -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data, name=name)


def compute_descriptives(
    sample: ArrayLike | SampleDesign,
    *,
    name: str = 'x',
) -> DescriptiveSolution:
    """
    Compute descriptive statistics for one numeric sample.

    Computes: n, mean, sd, variance, standard error, min, max, range,
    median, q1, q3, iqr, skewness and excess kurtosis.

    Parameters
    ----------
    sample : array-like or SampleDesign
        1D finite numeric sample. Never modified.
    name : str
        Variable name for reports (ignored when a design is passed).

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    EmptySampleError
        If the sample has no observations.
    """
    design = _ensure_design(sample, name)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def percentile(sorted_sample: ArrayLike, p: float) -> float:
    """
    Percentile of an ascending-sorted sample by linear interpolation.

    Parameters
    ----------
    sorted_sample : array-like
        Sample already sorted ascending; order is not verified.
    p : float
        Percentile in [0, 100]. p=0 gives the minimum, p=100 the maximum.

    Raises
    ------
    EmptySampleError
        If the sample is empty.
    ValidationError
        If p is outside [0, 100].
    """
    arr = check_sample(sorted_sample, 'sorted_sample')
    check_not_empty(arr, 'sorted_sample')
    return percentile_sorted(arr, p)


def covariance(x: ArrayLike, y: ArrayLike) -> float:
    """
    Sample covariance of paired observations (n - 1 denominator).

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientDataError
        If there are fewer than 2 pairs.
    """
    x_arr = check_sample(x, 'x')
    y_arr = check_sample(y, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    check_min_samples(x_arr, 2, 'x')

    n = x_arr.shape[0]
    return float(np.sum((x_arr - x_arr.mean()) * (y_arr - y_arr.mean())) / (n - 1))


def convert_to_ranks(sample: ArrayLike) -> NDArray[np.float64]:
    """
    Tie-averaged 1-based ranks.

    Values that compare exactly equal form one tie group; every member
    gets the mean of the positions the group occupies.

    >>> convert_to_ranks([10, 20, 20, 30])
    array([1. , 2.5, 2.5, 4. ])
    """
    arr = check_sample(sample, 'sample')
    return rankdata(arr, method='average').astype(np.float64)
