"""
Common types for normality testing.

Defines the NormalityTest enum and the NormalityParams payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NormalityTest(Enum):
    """Which goodness-of-fit test produced a normality result."""
    SHAPIRO_WILK = "Shapiro-Wilk"
    KOLMOGOROV_SMIRNOV = "Kolmogorov-Smirnov"

    @property
    def statistic_name(self) -> str:
        """Conventional symbol of the test statistic."""
        return "W" if self is NormalityTest.SHAPIRO_WILK else "D"


DECISION_NORMAL = "Data are consistent with a normal distribution (p > {alpha:g})"
DECISION_NOT_NORMAL = "Data deviate from a normal distribution (p ≤ {alpha:g})"


@dataclass(frozen=True)
class NormalityParams:
    """
    Parameter payload for a normality test.

    Attributes
    ----------
    test : NormalityTest
        Test that ran.
    selection_reason : str
        Which sample-size branch fired, e.g. "n < 50" or "n ≥ 50".
    statistic : float
        W for Shapiro-Wilk, D for Kolmogorov-Smirnov.
    p_value : float
        Approximate p-value.
    n : int
        Sample size.
    is_normal : bool
        True exactly when p_value > alpha. Downstream method selection
        reads only this flag.
    decision : str
        Human-readable decision.
    alpha : float
        Significance level used for the decision.
    """
    test: NormalityTest
    selection_reason: str
    statistic: float
    p_value: float
    n: int
    is_normal: bool
    decision: str
    alpha: float = 0.05

    def __post_init__(self) -> None:
        if self.is_normal != (self.p_value > self.alpha):
            raise ValueError(
                f"is_normal={self.is_normal} contradicts p_value={self.p_value} "
                f"and alpha={self.alpha}"
            )


def decide(p_value: float, alpha: float) -> tuple[bool, str]:
    """Normality decision and its text for a p-value."""
    if p_value > alpha:
        return True, DECISION_NORMAL.format(alpha=alpha)
    return False, DECISION_NOT_NORMAL.format(alpha=alpha)
