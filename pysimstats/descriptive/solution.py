"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from pysimstats.core.result import Result

if TYPE_CHECKING:
    from pysimstats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics of one sample.

    Attributes
    ----------
    n : int
        Number of observations.
    mean : float
        Arithmetic mean.
    sd : float
        Sample standard deviation (n - 1 denominator); 0 when n = 1.
    variance : float
        Sample variance (n - 1 denominator); 0 when n = 1.
    standard_error : float
        sd / sqrt(n).
    min, max, range : float
        Extremes and their difference.
    median : float
        Middle value (midpoint of the two middle values for even n).
    q1, q3, iqr : float
        25th and 75th percentiles (linear interpolation) and q3 - q1.
    skewness : float
        Bias-adjusted sample skewness; 0 when sd = 0 or n < 3.
    kurtosis : float
        Bias-adjusted excess kurtosis; 0 when sd = 0 or n < 4.
    """
    n: int
    mean: float
    sd: float
    variance: float
    standard_error: float
    min: float
    max: float
    range: float
    median: float
    q1: float
    q3: float
    iqr: float
    skewness: float
    kurtosis: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sd(self) -> float:
        """Sample standard deviation (Bessel-corrected, n-1)."""
        return self._result.params.sd

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def q1(self) -> float:
        """First quartile (25th percentile)."""
        return self._result.params.q1

    @property
    def q3(self) -> float:
        """Third quartile (75th percentile)."""
        return self._result.params.q3

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def skewness(self) -> float:
        """Bias-adjusted skewness."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Bias-adjusted excess kurtosis (0 for normal-like tails)."""
        return self._result.params.kurtosis

    # --- Metadata ---

    @property
    def name(self) -> str:
        """Variable name from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, float | int]:
        """Plain mapping of every statistic, for presentation layers."""
        return asdict(self._result.params)

    def summary(self) -> str:
        """Two-column text table of every statistic."""
        labels = [
            ("N", "n"),
            ("Mean", "mean"),
            ("Std. Deviation", "sd"),
            ("Variance", "variance"),
            ("Std. Error", "standard_error"),
            ("Minimum", "min"),
            ("Maximum", "max"),
            ("Range", "range"),
            ("Median", "median"),
            ("1st Qu.", "q1"),
            ("3rd Qu.", "q3"),
            ("IQR", "iqr"),
            ("Skewness", "skewness"),
            ("Kurtosis", "kurtosis"),
        ]
        values = self.to_dict()
        label_width = max(len(lbl) for lbl, _ in labels)

        lines = [f"Descriptive Statistics: {self.name}"]
        for label, key in labels:
            value = values[key]
            text = str(value) if key == "n" else f"{value:.6f}"
            lines.append(f"  {label.ljust(label_width)}  {text}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(name={self.name!r}, n={p.n}, "
            f"mean={p.mean:.6g}, sd={p.sd:.6g})"
        )
