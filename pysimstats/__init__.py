"""
PySimStats: statistical computing for simulated psychometric research.

Descriptive statistics, normality testing and correlation analysis with
automatic Pearson/Spearman selection, plus a seeded generator for
simulated questionnaire datasets.

Submodules:
    descriptive: Summary statistics, percentiles, ranks
    normality: Shapiro-Wilk and Kolmogorov-Smirnov tests
    correlation: Pearson and Spearman correlation with interpretation
    simulation: Box-Muller data generator
"""

__version__ = "0.1.0"

from pysimstats import descriptive
from pysimstats import normality
from pysimstats import correlation
from pysimstats import simulation

from pysimstats.descriptive import compute_descriptives
from pysimstats.normality import run_normality_test
from pysimstats.correlation import compute_correlation
from pysimstats.simulation import generate_dataset

__all__ = [
    "__version__",
    "descriptive",
    "normality",
    "correlation",
    "simulation",
    "compute_descriptives",
    "run_normality_test",
    "compute_correlation",
    "generate_dataset",
]
