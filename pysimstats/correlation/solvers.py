"""
Solver dispatch for correlation analysis.

compute_correlation() picks Pearson or Spearman from the normality of
both samples. pearson() and spearman() force a method. The batch helpers
correlation_by_dimensions() and correlation_matrix() record a
CorrelationFailure for any pair that raises and keep going.
"""

from __future__ import annotations

from collections.abc import Mapping
from numpy.typing import ArrayLike

from pysimstats.core.config import CorrelationConfig
from pysimstats.core.exceptions import PySimStatsError
from pysimstats.correlation._common import (
    CorrelationMethod,
    CoefficientEstimate,
    Sidedness,
)
from pysimstats.correlation.design import PairedDesign
from pysimstats.correlation.solution import (
    CorrelationSolution,
    CorrelationFailure,
    SelfCorrelation,
)
from pysimstats.correlation.backends.cpu import CPUCorrelationBackend


MatrixEntry = CorrelationSolution | CorrelationFailure | SelfCorrelation


def compute_correlation(
    x: ArrayLike,
    y: ArrayLike,
    sidedness: Sidedness | str = Sidedness.TWO_SIDED,
    *,
    config: CorrelationConfig | None = None,
    names: tuple[str, str] = ('x', 'y'),
) -> CorrelationSolution:
    """
    Correlate two paired samples, choosing the coefficient by normality.

    Both samples are tested for normality first. Pearson is used when
    both are normal, Spearman otherwise.

    Parameters
    ----------
    x, y : array-like
        Paired 1D finite numeric samples of equal length (n >= 3).
    sidedness : Sidedness or str
        'two-sided' (default) or 'one-sided'.
    config : CorrelationConfig, optional
        Normality settings, Spearman p-value cutoff and strength thresholds.
    names : tuple of str
        Variable names for reports.

    Returns
    -------
    CorrelationSolution

    Raises
    ------
    LengthMismatchError
        If x and y differ in length.
    InsufficientDataError
        If there are fewer than 3 pairs.
    ValidationError
        If sidedness is not recognised or a sample is non-numeric.
    """
    design = PairedDesign.from_arrays(
        x, y, sidedness=sidedness, config=config, names=names
    )
    result = CPUCorrelationBackend().solve(design)
    return CorrelationSolution(_result=result, _design=design)


def pearson(
    x: ArrayLike,
    y: ArrayLike,
    sidedness: Sidedness | str = Sidedness.TWO_SIDED,
    *,
    config: CorrelationConfig | None = None,
) -> CoefficientEstimate:
    """Pearson r and its p-value, with no normality gate."""
    design = PairedDesign.from_arrays(x, y, sidedness=sidedness, config=config)
    return CPUCorrelationBackend().estimate(design, CorrelationMethod.PEARSON).params


def spearman(
    x: ArrayLike,
    y: ArrayLike,
    sidedness: Sidedness | str = Sidedness.TWO_SIDED,
    *,
    config: CorrelationConfig | None = None,
) -> CoefficientEstimate:
    """Spearman rho and its p-value, with no normality gate."""
    design = PairedDesign.from_arrays(x, y, sidedness=sidedness, config=config)
    return CPUCorrelationBackend().estimate(design, CorrelationMethod.SPEARMAN).params


def correlation_by_dimensions(
    dims_x: Mapping[str, ArrayLike],
    dims_y: Mapping[str, ArrayLike],
    sidedness: Sidedness | str = Sidedness.TWO_SIDED,
    *,
    config: CorrelationConfig | None = None,
) -> list[CorrelationSolution | CorrelationFailure]:
    """
    Correlate every dimension of one variable with every dimension of another.

    Results are ordered by dims_x, then dims_y.
    """
    side = Sidedness.parse(sidedness)
    results: list[CorrelationSolution | CorrelationFailure] = []
    for x_name, x_values in dims_x.items():
        for y_name, y_values in dims_y.items():
            try:
                results.append(compute_correlation(
                    x_values, y_values, side, config=config, names=(x_name, y_name)
                ))
            except PySimStatsError as e:
                results.append(CorrelationFailure(x_name=x_name, y_name=y_name, message=str(e)))
    return results


def correlation_matrix(
    variables: Mapping[str, ArrayLike],
    sidedness: Sidedness | str = Sidedness.TWO_SIDED,
    *,
    config: CorrelationConfig | None = None,
) -> dict[str, dict[str, MatrixEntry]]:
    """
    Symmetric matrix of correlations between named variables.

    matrix[a][b] and matrix[b][a] are the same object, computed once.
    The diagonal holds SelfCorrelation entries (coefficient 1, p 0).
    """
    side = Sidedness.parse(sidedness)
    names = list(variables)
    matrix: dict[str, dict[str, MatrixEntry]] = {name: {} for name in names}

    for i, a in enumerate(names):
        matrix[a][a] = SelfCorrelation(name=a)
        for b in names[i + 1:]:
            try:
                entry: MatrixEntry = compute_correlation(
                    variables[a], variables[b], side, config=config, names=(a, b)
                )
            except PySimStatsError as e:
                entry = CorrelationFailure(x_name=a, y_name=b, message=str(e))
            matrix[a][b] = entry
            matrix[b][a] = entry

    # Rebuild rows in input column order
    return {a: {b: matrix[a][b] for b in names} for a in names}
