"""
Shared compute infrastructure for PySimStats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    special: Normal CDF, log-gamma, incomplete beta, t tail probability
    timing: Execution timing utilities
    tolerances: Precision tiers used by the test suite
"""

from pysimstats.core.compute.special import (
    normal_cdf,
    ln_gamma,
    incomplete_beta,
    t_distribution_p_value,
)
from pysimstats.core.compute.timing import Timer

__all__ = [
    # Special functions
    "normal_cdf",
    "ln_gamma",
    "incomplete_beta",
    "t_distribution_p_value",
    # Timing
    "Timer",
]
