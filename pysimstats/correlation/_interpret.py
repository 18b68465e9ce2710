"""
Qualitative interpretation of correlation results.

Strength follows Cohen-style thresholds on |r|; significance is tiered on
the p-value. Both tables are independent of the Pearson/Spearman choice,
which depends on normality only.
"""

from __future__ import annotations

from pysimstats.core.config import CorrelationThresholds, DEFAULT_THRESHOLDS
from pysimstats.correlation._common import Interpretation


# (upper bound on p, label), checked in order
_SIGNIFICANCE_TIERS = (
    (0.001, "highly significant"),
    (0.01, "very significant"),
    (0.05, "significant"),
)
NOT_SIGNIFICANT = "not significant"


def classify_strength(
    coefficient: float,
    thresholds: CorrelationThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Strength label for |coefficient|."""
    magnitude = abs(coefficient)
    if magnitude < thresholds.none:
        return "none"
    if magnitude < thresholds.weak:
        return "weak"
    if magnitude < thresholds.moderate:
        return "moderate"
    if magnitude < thresholds.moderate_strong:
        return "moderate-strong"
    if magnitude < thresholds.strong:
        return "strong"
    return "very strong"


def classify_direction(coefficient: float) -> str:
    return "positive" if coefficient >= 0 else "negative"


def classify_significance(p_value: float) -> str:
    """Significance tier of a p-value."""
    for bound, label in _SIGNIFICANCE_TIERS:
        if p_value < bound:
            return label
    return NOT_SIGNIFICANT


def interpret_correlation(
    coefficient: float,
    p_value: float,
    thresholds: CorrelationThresholds = DEFAULT_THRESHOLDS,
) -> Interpretation:
    """
    Strength, direction and significance of a correlation.

    >>> interpret_correlation(-0.62, 0.004).text
    'moderate-strong negative correlation, very significant'
    """
    strength = classify_strength(coefficient, thresholds)
    direction = classify_direction(coefficient)
    significance = classify_significance(p_value)
    return Interpretation(
        strength=strength,
        direction=direction,
        significance=significance,
        text=f"{strength} {direction} correlation, {significance}",
    )
