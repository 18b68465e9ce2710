"""
Correlation analysis.

Pearson or Spearman correlation chosen by the normality of both
variables, with p-values, qualitative interpretation and hypothesis
decisions.
"""

from pysimstats.correlation._common import (
    CorrelationMethod,
    Sidedness,
    Interpretation,
    CoefficientEstimate,
    CorrelationParams,
)
from pysimstats.correlation._interpret import interpret_correlation
from pysimstats.correlation.design import PairedDesign
from pysimstats.correlation.solution import (
    CorrelationSolution,
    HypothesisDecision,
    CorrelationFailure,
    SelfCorrelation,
)
from pysimstats.correlation.solvers import (
    compute_correlation,
    pearson,
    spearman,
    correlation_by_dimensions,
    correlation_matrix,
)

__all__ = [
    "compute_correlation",
    "pearson",
    "spearman",
    "correlation_by_dimensions",
    "correlation_matrix",
    "interpret_correlation",
    "PairedDesign",
    "CorrelationMethod",
    "Sidedness",
    "Interpretation",
    "CoefficientEstimate",
    "CorrelationParams",
    "CorrelationSolution",
    "HypothesisDecision",
    "CorrelationFailure",
    "SelfCorrelation",
]
