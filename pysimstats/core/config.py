"""
Immutable configuration records for PySimStats.

There is no process-wide mutable configuration. Every threshold the
engines use lives in a frozen dataclass that is passed explicitly through
a ``config=`` keyword; the DEFAULT_* instances below are what callers get
when they pass nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pysimstats.core.exceptions import ValidationError


VALID_SHAPIRO_WEIGHTS = ('uniform', 'royston')


@dataclass(frozen=True)
class NormalityConfig:
    """
    Normality test settings.

    Attributes:
        alpha: Significance level; a sample is normal when p > alpha.
        min_observations: Smallest n a normality test accepts.
        shapiro_wilk_max_n: Samples below this size use Shapiro-Wilk,
            samples at or above it use Kolmogorov-Smirnov.
        shapiro_weights: 'uniform' uses the 1/sqrt(n) weight approximation;
            'royston' uses tabulated coefficients via scipy.stats.shapiro.
    """
    alpha: float = 0.05
    min_observations: int = 3
    shapiro_wilk_max_n: int = 50
    shapiro_weights: str = 'uniform'

    def __post_init__(self) -> None:
        if not 0.0 < self.alpha < 1.0:
            raise ValidationError(f"alpha must be in (0, 1), got {self.alpha}")
        if self.min_observations < 3:
            raise ValidationError(
                f"min_observations must be >= 3, got {self.min_observations}"
            )
        if self.shapiro_wilk_max_n <= self.min_observations:
            raise ValidationError(
                f"shapiro_wilk_max_n ({self.shapiro_wilk_max_n}) must exceed "
                f"min_observations ({self.min_observations})"
            )
        if self.shapiro_weights not in VALID_SHAPIRO_WEIGHTS:
            raise ValidationError(
                f"shapiro_weights must be one of {VALID_SHAPIRO_WEIGHTS}, "
                f"got {self.shapiro_weights!r}"
            )


@dataclass(frozen=True)
class CorrelationThresholds:
    """Upper bounds on |r| for each strength label (Cohen-style)."""
    none: float = 0.10
    weak: float = 0.30
    moderate: float = 0.50
    moderate_strong: float = 0.70
    strong: float = 0.90

    def __post_init__(self) -> None:
        bounds = (self.none, self.weak, self.moderate, self.moderate_strong, self.strong)
        if any(b <= 0 or b > 1 for b in bounds) or list(bounds) != sorted(set(bounds)):
            raise ValidationError(
                f"Correlation thresholds must be strictly increasing in (0, 1], got {bounds}"
            )


@dataclass(frozen=True)
class CorrelationConfig:
    """
    Correlation engine settings.

    Attributes:
        min_observations: Smallest number of pairs accepted.
        spearman_normal_min_n: Spearman uses the normal approximation
            for its p-value from this n upward, the t formula below it.
        normality: Settings for the normality gate on each variable.
        thresholds: Strength labels for the interpretation.
    """
    min_observations: int = 3
    spearman_normal_min_n: int = 11
    normality: NormalityConfig = field(default_factory=NormalityConfig)
    thresholds: CorrelationThresholds = field(default_factory=CorrelationThresholds)

    def __post_init__(self) -> None:
        if self.min_observations < 3:
            raise ValidationError(
                f"min_observations must be >= 3, got {self.min_observations}"
            )
        if self.spearman_normal_min_n < 3:
            raise ValidationError(
                f"spearman_normal_min_n must be >= 3, got {self.spearman_normal_min_n}"
            )


@dataclass(frozen=True)
class GeneratorLimits:
    """Bounds applied when validating data generator configuration."""
    sample_size_min: int = 2
    sample_size_max: int = 100_000
    items_min: int = 1
    items_max: int = 500
    decimals_min: int = 0
    decimals_max: int = 4
    decimals_default: int = 2
    low_power_n: int = 30
    large_n: int = 10_000
    short_code_length: int = 10


DEFAULT_NORMALITY = NormalityConfig()
DEFAULT_CORRELATION = CorrelationConfig()
DEFAULT_THRESHOLDS = CorrelationThresholds()
DEFAULT_GENERATOR_LIMITS = GeneratorLimits()
