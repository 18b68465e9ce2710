"""
CPU backend for simulated datasets.

BoxMullerSampler turns uniform draws from a numpy Generator into normal
draws with the basic Box-Muller transform. CPUDatasetBackend fills every
configured column with clamped, rounded draws.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.simulation._common import DatasetParams, ID_COLUMN, round_half_up
from pysimstats.simulation.design import (
    DemographicConfig,
    GeneratorConfig,
    PsychometricTestConfig,
)


class BoxMullerSampler:
    """
    Normal sampler over an injectable uniform source.

    z = sqrt(-2 ln u1) * cos(2 pi u2), with u1 redrawn while it is
    exactly 0 so the log stays finite.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def standard_normal(self, size: int) -> NDArray[np.float64]:
        u1 = self._rng.random(size)
        zeros = u1 == 0.0
        while np.any(zeros):
            u1[zeros] = self._rng.random(int(np.count_nonzero(zeros)))
            zeros = u1 == 0.0
        u2 = self._rng.random(size)
        return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

    def normal(self, mean: float, sd: float, size: int) -> NDArray[np.float64]:
        return mean + sd * self.standard_normal(size)


def clamped_items(
    sampler: BoxMullerSampler,
    mean: float,
    sd: float,
    lower: float,
    upper: float,
    shape: int | tuple[int, ...],
) -> NDArray[np.int64]:
    """Normal draws clamped to [lower, upper] and rounded half-up to integers."""
    size = int(np.prod(shape))
    draws = np.clip(sampler.normal(mean, sd, size), lower, upper)
    return round_half_up(draws).astype(np.int64).reshape(shape)


class CPUDatasetBackend:
    """CPU backend for dataset generation."""

    def __init__(self, rng: np.random.Generator | None = None):
        self._sampler = BoxMullerSampler(rng)

    @property
    def name(self) -> str:
        return 'cpu_dataset'

    def solve(self, config: GeneratorConfig) -> Result[DatasetParams]:
        """
        Generate every column of the dataset.

        Raises:
            DuplicateColumnError: If configured column codes collide.
        """
        plan = config.column_plan()

        timer = Timer()
        timer.start()

        n = config.sample_size
        columns: dict[str, NDArray] = {ID_COLUMN: np.arange(1, n + 1, dtype=np.int64)}

        with timer.section('demographics'):
            for demo in config.demographics:
                columns[demo.code] = self._demographic(demo, n)

        with timer.section('tests'):
            for test in config.tests:
                items = self._test_items(test, n)
                for k, column in enumerate(test.item_columns):
                    columns[column] = items[:, k]
                columns[test.total_column] = items.sum(axis=1)

        timer.stop()

        for column in columns.values():
            column.setflags(write=False)

        params = DatasetParams(
            columns={name: columns[name] for name in plan},
            sample_size=n,
        )
        return Result(
            params=params,
            info={
                'sampler': 'box_muller',
                'n_tests': len(config.tests),
                'n_demographics': len(config.demographics),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(config.config_warnings()),
        )

    def _demographic(self, demo: DemographicConfig, n: int) -> NDArray:
        values = self._sampler.normal(demo.mean, demo.sd, n)
        if demo.is_bounded:
            values = np.clip(values, demo.min, demo.max)
        values = round_half_up(values, demo.decimal_places)
        if demo.decimal_places == 0:
            return values.astype(np.int64)
        return values

    def _test_items(self, test: PsychometricTestConfig, n: int) -> NDArray[np.int64]:
        return clamped_items(
            self._sampler, test.mean, test.sd, test.item_min, test.item_max,
            (n, test.item_count),
        )
