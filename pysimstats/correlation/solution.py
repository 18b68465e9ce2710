"""
Correlation solution types.

CorrelationSolution wraps Result[CorrelationParams] and adds the
hypothesis-test decision and a text summary. HypothesisDecision and
CorrelationFailure are the plain records the batch helpers return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pysimstats.core.exceptions import ValidationError
from pysimstats.core.result import Result
from pysimstats.correlation._common import (
    CorrelationMethod,
    CorrelationParams,
    Interpretation,
    Sidedness,
)

if TYPE_CHECKING:
    from pysimstats.correlation.design import PairedDesign
    from pysimstats.normality.solution import NormalityResult


@dataclass(frozen=True)
class HypothesisDecision:
    """
    Decision on H0: no correlation, at level alpha.

    reject_null is p_value < alpha.
    """
    alpha: float
    p_value: float
    reject_null: bool
    null_conclusion: str
    alternative_conclusion: str


@dataclass(frozen=True)
class CorrelationFailure:
    """A pair in a batch computation that raised instead of producing a result."""
    x_name: str
    y_name: str
    message: str


@dataclass
class CorrelationSolution:
    """
    User-facing correlation result.

    The method is Pearson exactly when both normality results are normal.
    """
    _result: Result[CorrelationParams]
    _design: 'PairedDesign'

    @property
    def params(self) -> CorrelationParams:
        return self._result.params

    @property
    def coefficient(self) -> float:
        return self._result.params.coefficient

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def method(self) -> CorrelationMethod:
        return self._result.params.method

    @property
    def sidedness(self) -> Sidedness:
        return self._result.params.sidedness

    @property
    def normality_x(self) -> 'NormalityResult':
        return self._result.params.normality_x

    @property
    def normality_y(self) -> 'NormalityResult':
        return self._result.params.normality_y

    @property
    def interpretation(self) -> Interpretation:
        return self._result.params.interpretation

    # --- Metadata ---

    @property
    def names(self) -> tuple[str, str]:
        return (self._design.x.name, self._design.y.name)

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

    def hypothesis_test(self, alpha: float = 0.05) -> HypothesisDecision:
        """
        Test H0: no correlation, rejecting when p_value < alpha.

        Raises
        ------
        ValidationError
            If alpha is not in (0, 1).
        """
        if not 0.0 < alpha < 1.0:
            raise ValidationError(f"alpha must be in (0, 1), got {alpha}")

        p = self.p_value
        reject = p < alpha
        if reject:
            null_conclusion = f"Reject the null hypothesis (p = {p:.4f} < alpha = {alpha})"
            alternative_conclusion = (
                f"There is a statistically significant "
                f"{self.interpretation.direction} relationship"
            )
        else:
            null_conclusion = f"Fail to reject the null hypothesis (p = {p:.4f} >= alpha = {alpha})"
            alternative_conclusion = (
                "There is not enough evidence of a statistically significant relationship"
            )
        return HypothesisDecision(
            alpha=alpha,
            p_value=p,
            reject_null=reject,
            null_conclusion=null_conclusion,
            alternative_conclusion=alternative_conclusion,
        )

    def summary(self) -> str:
        """Report with both normality tests, the coefficient and its reading."""
        p = self._result.params
        x_name, y_name = self.names
        lines = [
            f"{p.method.value} correlation ({p.sidedness.value})",
            f"data: {x_name} and {y_name}, n = {p.n}",
            "",
            "Normality:",
        ]
        for name, result in ((x_name, p.normality_x), (y_name, p.normality_y)):
            lines.append(
                f"  {name}: {result.test_name} ({result.selection_reason}), "
                f"{result.test.statistic_name} = {result.statistic:.4f}, "
                f"p = {result.p_value:.4f}, normal = {result.is_normal}"
            )
        lines.extend([
            "",
            f"{p.method.symbol} = {p.coefficient:.4f}, p-value = {p.p_value:.4f}",
            p.interpretation.text,
        ])
        if self.warnings:
            lines.append("")
            lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CorrelationSolution(method={p.method.value!r}, "
            f"coefficient={p.coefficient:.4f}, p_value={p.p_value:.4f}, n={p.n})"
        )


@dataclass(frozen=True)
class SelfCorrelation:
    """Diagonal entry of a correlation matrix."""
    name: str
    coefficient: float = 1.0
    p_value: float = 0.0
