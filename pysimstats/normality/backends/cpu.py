"""
CPU backend for normality tests.

Dispatches to the test-specific submodule chosen by the design's
sample-size rule.
"""

from __future__ import annotations

from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.descriptive.backends.cpu import CPUDescriptiveBackend
from pysimstats.normality._common import NormalityParams, NormalityTest, decide
from pysimstats.normality.design import NormalityDesign


class CPUNormalityBackend:
    """CPU backend for normality tests."""

    @property
    def name(self) -> str:
        return 'cpu_normality'

    def solve(self, design: NormalityDesign) -> Result[NormalityParams]:
        """Run Shapiro-Wilk or Kolmogorov-Smirnov according to design.test."""
        timer = Timer()
        timer.start()

        test = design.test
        config = design.config
        warnings_list: list[str] = []

        with timer.section('descriptives'):
            descriptives = CPUDescriptiveBackend().solve(design.sample).params
            ordered = design.sample.sorted()

        if descriptives.sd == 0:
            warnings_list.append(
                "sample is constant; standardized values are all 0"
            )

        with timer.section(test.name.lower()):
            if test is NormalityTest.SHAPIRO_WILK:
                from pysimstats.normality.backends._shapiro_wilk import shapiro_wilk
                statistic, p_value = shapiro_wilk(
                    ordered, descriptives.mean, descriptives.sd,
                    weights=config.shapiro_weights,
                )
            elif test is NormalityTest.KOLMOGOROV_SMIRNOV:
                from pysimstats.normality.backends._ks_test import kolmogorov_smirnov
                statistic, p_value = kolmogorov_smirnov(
                    ordered, descriptives.mean, descriptives.sd,
                )
            else:
                raise ValueError(f"Unknown normality test: {test!r}")

        normal, decision = decide(p_value, config.alpha)

        timer.stop()

        params = NormalityParams(
            test=test,
            selection_reason=design.selection_reason,
            statistic=statistic,
            p_value=p_value,
            n=design.n,
            is_normal=normal,
            decision=decision,
            alpha=config.alpha,
        )

        info = {'test': test.value}
        if test is NormalityTest.SHAPIRO_WILK:
            info['weights'] = config.shapiro_weights

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
