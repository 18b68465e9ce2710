"""
CPU backend for descriptive statistics of a single sample.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.core.validation import check_not_empty
from pysimstats.descriptive.design import SampleDesign
from pysimstats.descriptive.solution import DescriptiveParams
from pysimstats.descriptive._percentile import percentile_sorted, median_sorted


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: SampleDesign) -> Result[DescriptiveParams]:
        """
        Compute every descriptive statistic for the design's sample.

        Raises
        ------
        EmptySampleError
            If the sample has no observations.
        """
        check_not_empty(design.data, design.name)

        timer = Timer()
        timer.start()

        data = design.data
        n = design.n
        warnings_list: list[str] = []

        with timer.section('moments'):
            mean, variance = self._mean_variance(data)
            sd = float(np.sqrt(variance))
            standard_error = sd / float(np.sqrt(n))

        with timer.section('order_statistics'):
            # np.sort copies; the design's array is never reordered
            ordered = np.sort(data)
            minimum = float(ordered[0])
            maximum = float(ordered[-1])
            median = median_sorted(ordered)
            q1 = percentile_sorted(ordered, 25.0)
            q3 = percentile_sorted(ordered, 75.0)

        with timer.section('shape'):
            skewness = self._skewness(data, mean, sd)
            kurtosis = self._kurtosis(data, mean, sd)

        if n < 3:
            warnings_list.append(
                f"n={n}: skewness needs n >= 3 and kurtosis n >= 4; both reported as 0"
            )
        elif n < 4:
            warnings_list.append(f"n={n}: kurtosis needs n >= 4; reported as 0")

        timer.stop()

        params = DescriptiveParams(
            n=n,
            mean=mean,
            sd=sd,
            variance=variance,
            standard_error=standard_error,
            min=minimum,
            max=maximum,
            range=maximum - minimum,
            median=median,
            q1=q1,
            q3=q3,
            iqr=q3 - q1,
            skewness=skewness,
            kurtosis=kurtosis,
        )

        return Result(
            params=params,
            info={'percentile_method': 'linear', 'ddof': 1},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # --- Moments ---

    def _mean_variance(self, data: NDArray) -> tuple[float, float]:
        """Mean and Bessel-corrected variance (0 for n = 1 or constant data)."""
        n = data.shape[0]
        if np.all(data == data[0]):
            # Exact for constant samples; the summed mean can be off by an ulp
            return float(data[0]), 0.0

        mean = float(np.mean(data))
        if n < 2:
            return mean, 0.0
        variance = float(np.sum((data - mean) ** 2) / (n - 1))
        return mean, variance

    def _skewness(self, data: NDArray, mean: float, sd: float) -> float:
        """
        Bias-adjusted sample skewness.

        Formula:
            skewness = n / ((n-1)(n-2)) * sum(((x - mean) / sd)^3)

        with sd the n-1 standard deviation. Equivalent to
        e1071::skewness(type=2). Returns 0 when sd = 0 or n < 3.
        """
        n = data.shape[0]
        if sd == 0 or n < 3:
            return 0.0

        z = (data - mean) / sd
        return float(n / ((n - 1.0) * (n - 2.0)) * np.sum(z ** 3))

    def _kurtosis(self, data: NDArray, mean: float, sd: float) -> float:
        """
        Bias-adjusted excess kurtosis.

        Formula:
            k = n(n+1) / ((n-1)(n-2)(n-3)) * sum(((x - mean) / sd)^4)
                - 3(n-1)^2 / ((n-2)(n-3))

        Equivalent to e1071::kurtosis(type=2). Returns 0 when sd = 0 or n < 4.
        """
        n = data.shape[0]
        if sd == 0 or n < 4:
            return 0.0

        z = (data - mean) / sd
        n = float(n)
        scale = n * (n + 1.0) / ((n - 1.0) * (n - 2.0) * (n - 3.0))
        correction = 3.0 * (n - 1.0) ** 2 / ((n - 2.0) * (n - 3.0))
        return float(scale * np.sum(z ** 4) - correction)
