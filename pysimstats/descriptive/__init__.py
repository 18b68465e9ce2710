"""
Descriptive statistics module.

Public API:
    compute_descriptives(x)  - All statistics of one sample at once
    percentile(sorted_x, p)  - Linear-interpolation percentile
    covariance(x, y)         - Sample covariance (Bessel-corrected)
    convert_to_ranks(x)      - Tie-averaged ranks
"""

from pysimstats.descriptive.design import SampleDesign
from pysimstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pysimstats.descriptive.solvers import (
    compute_descriptives,
    percentile,
    covariance,
    convert_to_ranks,
)

__all__ = [
    "compute_descriptives",
    "percentile",
    "covariance",
    "convert_to_ranks",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
