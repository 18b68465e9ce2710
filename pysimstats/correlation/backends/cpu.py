"""
CPU backend for correlation analysis.

solve() gates the coefficient on the normality of both variables;
estimate() computes a caller-chosen coefficient without the gate.
"""

from __future__ import annotations

import warnings

from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.descriptive.design import SampleDesign
from pysimstats.normality.design import NormalityDesign
from pysimstats.normality.solution import NormalityResult
from pysimstats.normality.backends.cpu import CPUNormalityBackend
from pysimstats.correlation._common import (
    CorrelationMethod,
    CorrelationParams,
    CoefficientEstimate,
)
from pysimstats.correlation._interpret import interpret_correlation
from pysimstats.correlation.design import PairedDesign
from pysimstats.correlation.backends._coefficients import (
    pearson_coefficient,
    spearman_coefficient,
    pearson_p_value,
    spearman_p_value,
)


class CPUCorrelationBackend:
    """CPU backend for Pearson and Spearman correlation."""

    @property
    def name(self) -> str:
        return 'cpu_correlation'

    def solve(self, design: PairedDesign) -> Result[CorrelationParams]:
        """
        Test both variables for normality, then compute Pearson if both
        are normal and Spearman otherwise.
        """
        timer = Timer()
        timer.start()

        normality_backend = CPUNormalityBackend()
        with timer.section('normality'):
            normality_x = self._normality(normality_backend, design, design.x)
            normality_y = self._normality(normality_backend, design, design.y)

        method = CorrelationMethod.select(normality_x.is_normal, normality_y.is_normal)

        with timer.section('coefficient'):
            coefficient, p_value, warnings_list = self._coefficient(design, method)

        with timer.section('interpretation'):
            interpretation = interpret_correlation(
                coefficient, p_value, design.config.thresholds
            )

        timer.stop()

        params = CorrelationParams(
            coefficient=coefficient,
            p_value=p_value,
            n=design.n,
            method=method,
            sidedness=design.sidedness,
            normality_x=normality_x,
            normality_y=normality_y,
            interpretation=interpretation,
        )

        warnings_list = (
            [f"{design.x.name}: {w}" for w in normality_x.warnings]
            + [f"{design.y.name}: {w}" for w in normality_y.warnings]
            + warnings_list
        )

        return Result(
            params=params,
            info={
                'method': method.value,
                'sidedness': design.sidedness.value,
                'normality_tests': (normality_x.test_name, normality_y.test_name),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def estimate(
        self,
        design: PairedDesign,
        method: CorrelationMethod,
    ) -> Result[CoefficientEstimate]:
        """Compute the given coefficient and its p-value, no normality gate."""
        timer = Timer()
        timer.start()

        with timer.section('coefficient'):
            coefficient, p_value, warnings_list = self._coefficient(design, method)

        timer.stop()

        params = CoefficientEstimate(
            method=method,
            coefficient=coefficient,
            p_value=p_value,
            n=design.n,
            sidedness=design.sidedness,
        )
        return Result(
            params=params,
            info={'method': method.value, 'sidedness': design.sidedness.value},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _normality(
        self,
        backend: CPUNormalityBackend,
        design: PairedDesign,
        sample: SampleDesign,
    ) -> NormalityResult:
        normality_design = NormalityDesign.for_sample(
            sample, config=design.config.normality
        )
        return NormalityResult(
            _result=backend.solve(normality_design), _design=normality_design
        )

    def _coefficient(
        self,
        design: PairedDesign,
        method: CorrelationMethod,
    ) -> tuple[float, float, list[str]]:
        x = design.x.data
        y = design.y.data
        n = design.n
        warnings_list: list[str] = []

        if method is CorrelationMethod.PEARSON:
            coefficient, constant = pearson_coefficient(x, y)
            p_value = pearson_p_value(coefficient, n, design.sidedness)
        elif method is CorrelationMethod.SPEARMAN:
            coefficient, constant = spearman_coefficient(x, y)
            p_value = spearman_p_value(
                coefficient, n, design.sidedness, design.config.spearman_normal_min_n
            )
        else:
            raise ValueError(f"Unknown correlation method: {method!r}")

        if constant:
            message = (
                f"{design.x.name} or {design.y.name} is constant; "
                f"{method.value} coefficient set to 0"
            )
            warnings.warn(message, RuntimeWarning, stacklevel=2)
            warnings_list.append(message)

        return coefficient, p_value, warnings_list
