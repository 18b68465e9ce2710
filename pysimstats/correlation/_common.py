"""
Common types for correlation analysis.

Defines the CorrelationMethod and Sidedness enums, the Interpretation
record and the CorrelationParams payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from pysimstats.core.exceptions import ValidationError

if TYPE_CHECKING:
    from pysimstats.normality.solution import NormalityResult


class CorrelationMethod(Enum):
    """Correlation coefficient that was computed."""
    PEARSON = "Pearson"
    SPEARMAN = "Spearman"

    @property
    def symbol(self) -> str:
        return "r" if self is CorrelationMethod.PEARSON else "rho"

    @classmethod
    def select(cls, x_is_normal: bool, y_is_normal: bool) -> CorrelationMethod:
        """Pearson when both variables are normal, Spearman otherwise."""
        if x_is_normal and y_is_normal:
            return cls.PEARSON
        return cls.SPEARMAN


class Sidedness(Enum):
    """Alternative hypothesis of the correlation test."""
    TWO_SIDED = "two-sided"
    ONE_SIDED = "one-sided"

    @classmethod
    def parse(cls, value: Sidedness | str) -> Sidedness:
        """Accept an enum member or 'two-sided' / 'two.sided' / 'one-sided'."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace(".", "-").replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(
            f"sidedness must be 'two-sided' or 'one-sided', got {value!r}"
        )


@dataclass(frozen=True)
class Interpretation:
    """
    Qualitative reading of a coefficient and its p-value.

    Attributes
    ----------
    strength : str
        'none', 'weak', 'moderate', 'moderate-strong', 'strong' or
        'very strong'.
    direction : str
        'positive' (coefficient >= 0) or 'negative'.
    significance : str
        'highly significant', 'very significant', 'significant' or
        'not significant'.
    text : str
        One-line sentence combining the three.
    """
    strength: str
    direction: str
    significance: str
    text: str


@dataclass(frozen=True)
class CoefficientEstimate:
    """Coefficient, p-value and n from a forced-method computation."""
    method: CorrelationMethod
    coefficient: float
    p_value: float
    n: int
    sidedness: Sidedness


@dataclass(frozen=True)
class CorrelationParams:
    """
    Parameter payload for an automatically selected correlation.

    The method always follows the normality results: Pearson if and only
    if both variables were judged normal. Construction enforces this.
    """
    coefficient: float
    p_value: float
    n: int
    method: CorrelationMethod
    sidedness: Sidedness
    normality_x: 'NormalityResult'
    normality_y: 'NormalityResult'
    interpretation: Interpretation

    def __post_init__(self) -> None:
        expected = CorrelationMethod.select(
            self.normality_x.is_normal, self.normality_y.is_normal
        )
        if self.method is not expected:
            raise ValueError(
                f"method {self.method.value} contradicts normality results "
                f"(x normal={self.normality_x.is_normal}, "
                f"y normal={self.normality_y.is_normal})"
            )
