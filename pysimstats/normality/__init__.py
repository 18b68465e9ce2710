"""
Normality testing module.

Chooses the test by sample size: Shapiro-Wilk for n < 50,
Kolmogorov-Smirnov for n >= 50.

Public API:
    run_normality_test(x)   - Test one sample
    is_normal(x, alpha)     - Boolean shortcut
    normality_report(vars)  - Test several named samples
"""

from pysimstats.normality.solvers import (
    run_normality_test,
    is_normal,
    normality_report,
)
from pysimstats.normality.design import NormalityDesign
from pysimstats.normality._common import NormalityTest, NormalityParams
from pysimstats.normality.solution import NormalityResult, NormalityFailure

__all__ = [
    "run_normality_test",
    "is_normal",
    "normality_report",
    "NormalityDesign",
    "NormalityTest",
    "NormalityParams",
    "NormalityResult",
    "NormalityFailure",
]
