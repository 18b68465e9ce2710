"""
NormalityDesign: validated input for a normality test.

Bundles the sample with the settings that choose and judge the test.
Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from pysimstats.core.config import NormalityConfig, DEFAULT_NORMALITY
from pysimstats.core.validation import check_min_samples
from pysimstats.descriptive.design import SampleDesign
from pysimstats.normality._common import NormalityTest


@dataclass(frozen=True)
class NormalityDesign:
    """
    Design for a normality test.

    Attributes:
        sample: The validated sample.
        config: Thresholds (alpha, minimum n, Shapiro-Wilk cutoff, weights).
    """
    sample: SampleDesign
    config: NormalityConfig

    @classmethod
    def for_sample(
        cls,
        data: ArrayLike | SampleDesign,
        *,
        config: NormalityConfig | None = None,
        name: str = 'x',
    ) -> NormalityDesign:
        """
        Create a normality design with validation.

        Raises:
            InsufficientDataError: If the sample has fewer than
                config.min_observations values.
        """
        cfg = config if config is not None else DEFAULT_NORMALITY
        sample = data if isinstance(data, SampleDesign) else SampleDesign.from_array(data, name=name)
        check_min_samples(sample.data, cfg.min_observations, sample.name)
        return cls(sample=sample, config=cfg)

    @property
    def n(self) -> int:
        return self.sample.n

    @property
    def test(self) -> NormalityTest:
        """Shapiro-Wilk below the cutoff, Kolmogorov-Smirnov at or above it."""
        if self.n < self.config.shapiro_wilk_max_n:
            return NormalityTest.SHAPIRO_WILK
        return NormalityTest.KOLMOGOROV_SMIRNOV

    @property
    def selection_reason(self) -> str:
        cutoff = self.config.shapiro_wilk_max_n
        if self.test is NormalityTest.SHAPIRO_WILK:
            return f"n < {cutoff}"
        return f"n ≥ {cutoff}"
