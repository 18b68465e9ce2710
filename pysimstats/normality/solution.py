"""
Normality test solution types.

NormalityResult wraps Result[NormalityParams]; NormalityFailure records
a variable that could not be tested in a batch report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pysimstats.core.result import Result
from pysimstats.normality._common import NormalityParams, NormalityTest

if TYPE_CHECKING:
    from pysimstats.normality.design import NormalityDesign


@dataclass
class NormalityResult:
    """
    User-facing normality test result.

    is_normal is the single source of truth for downstream method
    selection and always equals p_value > alpha.
    """
    _result: Result[NormalityParams]
    _design: 'NormalityDesign'

    @property
    def params(self) -> NormalityParams:
        return self._result.params

    @property
    def test(self) -> NormalityTest:
        return self._result.params.test

    @property
    def test_name(self) -> str:
        """'Shapiro-Wilk' or 'Kolmogorov-Smirnov'."""
        return self._result.params.test.value

    @property
    def selection_reason(self) -> str:
        return self._result.params.selection_reason

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def is_normal(self) -> bool:
        return self._result.params.is_normal

    @property
    def decision(self) -> str:
        return self._result.params.decision

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    # --- Metadata ---

    @property
    def name(self) -> str:
        return self._design.sample.name

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

    def summary(self) -> str:
        """Short report of the test, its statistic and the decision."""
        p = self._result.params
        lines = [
            f"{p.test.value} normality test ({p.selection_reason})",
            f"data: {self.name}",
            f"{p.test.statistic_name} = {p.statistic:.4f}, p-value = {p.p_value:.4f}, n = {p.n}",
            p.decision,
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"NormalityResult(test={p.test.value!r}, statistic={p.statistic:.4f}, "
            f"p_value={p.p_value:.4f}, is_normal={p.is_normal})"
        )


@dataclass(frozen=True)
class NormalityFailure:
    """A variable in a batch report that raised instead of producing a result."""
    name: str
    message: str
    is_normal: None = None
