"""
Solver dispatch for normality tests.

Provides run_normality_test() plus the convenience wrappers is_normal()
and normality_report().
"""

from __future__ import annotations

from collections.abc import Mapping
from numpy.typing import ArrayLike

from pysimstats.core.config import NormalityConfig, DEFAULT_NORMALITY
from pysimstats.core.exceptions import PySimStatsError, InsufficientDataError
from pysimstats.descriptive.design import SampleDesign
from pysimstats.normality.design import NormalityDesign
from pysimstats.normality.solution import NormalityResult, NormalityFailure
from pysimstats.normality.backends.cpu import CPUNormalityBackend


def run_normality_test(
    sample: ArrayLike | SampleDesign | NormalityDesign,
    *,
    config: NormalityConfig | None = None,
    name: str = 'x',
) -> NormalityResult:
    """
    Test a sample for normality, choosing the test by sample size.

    3 <= n < 50 runs Shapiro-Wilk, n >= 50 runs Kolmogorov-Smirnov
    (the cutoff is config.shapiro_wilk_max_n).

    Parameters
    ----------
    sample : array-like, SampleDesign or NormalityDesign
        1D finite numeric sample.
    config : NormalityConfig, optional
        Thresholds and Shapiro-Wilk weighting. Defaults to
        NormalityConfig().
    name : str
        Variable name for reports.

    Returns
    -------
    NormalityResult

    Raises
    ------
    InsufficientDataError
        If the sample has fewer than 3 observations.
    """
    if isinstance(sample, NormalityDesign):
        design = sample
    else:
        design = NormalityDesign.for_sample(sample, config=config, name=name)

    result = CPUNormalityBackend().solve(design)
    return NormalityResult(_result=result, _design=design)


def is_normal(
    sample: ArrayLike,
    alpha: float = 0.05,
    *,
    config: NormalityConfig | None = None,
) -> bool:
    """
    Whether a sample passes the normality test at level alpha.

    Samples too small to test are reported as not normal rather than
    raising.
    """
    cfg = config if config is not None else DEFAULT_NORMALITY
    if alpha != cfg.alpha:
        cfg = NormalityConfig(
            alpha=alpha,
            min_observations=cfg.min_observations,
            shapiro_wilk_max_n=cfg.shapiro_wilk_max_n,
            shapiro_weights=cfg.shapiro_weights,
        )
    try:
        return run_normality_test(sample, config=cfg).is_normal
    except InsufficientDataError:
        return False


def normality_report(
    variables: Mapping[str, ArrayLike],
    *,
    config: NormalityConfig | None = None,
) -> dict[str, NormalityResult | NormalityFailure]:
    """
    Run the normality test on several named variables.

    A variable that fails validation is reported as a NormalityFailure
    carrying the error message; the remaining variables are still tested.
    """
    report: dict[str, NormalityResult | NormalityFailure] = {}
    for var_name, values in variables.items():
        try:
            report[var_name] = run_normality_test(values, config=config, name=var_name)
        except PySimStatsError as e:
            report[var_name] = NormalityFailure(name=var_name, message=str(e))
    return report
