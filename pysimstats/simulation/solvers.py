"""
Solver dispatch for data simulation.

generate_dataset() builds a full tabular dataset from a GeneratorConfig.
generate_normal() and generate_test_scores() expose the underlying draws.
Every function takes an optional numpy Generator so runs can be seeded.
"""

from __future__ import annotations

import numbers

import numpy as np

from pysimstats.core.exceptions import InvalidConfigurationError
from pysimstats.simulation._common import TestScores
from pysimstats.simulation.design import GeneratorConfig
from pysimstats.simulation.solution import GeneratedDataset
from pysimstats.simulation.backends.cpu import (
    BoxMullerSampler,
    CPUDatasetBackend,
    clamped_items,
)


def _resolve_rng(
    rng: np.random.Generator | None,
    seed: int | None = None,
) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def generate_normal(
    mean: float = 0.0,
    sd: float = 1.0,
    *,
    rng: np.random.Generator | None = None,
) -> float:
    """
    One draw from N(mean, sd) via Box-Muller.

    >>> generate_normal(10, 0)
    10.0
    """
    return float(BoxMullerSampler(rng).normal(mean, sd, 1)[0])


def generate_test_scores(
    item_count: int,
    item_mean: float,
    item_sd: float,
    min_item: float | None = 1,
    max_item: float | None = 7,
    *,
    rng: np.random.Generator | None = None,
) -> TestScores:
    """
    Simulated item scores for one respondent.

    Each item is a normal draw clamped to [min_item, max_item] and
    rounded half-up to an integer. None bounds fall back to the 1..7
    Likert range. item_sd = 0 is allowed and reproduces the mean.

    Raises:
        InvalidConfigurationError: If item_count < 1, item_sd < 0 or
            min_item >= max_item.
    """
    lower = 1 if min_item is None else min_item
    upper = 7 if max_item is None else max_item
    if not isinstance(item_count, numbers.Integral) or item_count < 1:
        raise InvalidConfigurationError(
            f"item_count must be an integer >= 1, got {item_count!r}", field='item_count', value=item_count
        )
    if item_sd < 0:
        raise InvalidConfigurationError(
            f"item_sd must be >= 0, got {item_sd}", field='sd', value=item_sd
        )
    if lower >= upper:
        raise InvalidConfigurationError(
            f"min_item ({lower}) must be less than max_item ({upper})",
            field='min', value=lower,
        )

    items = clamped_items(BoxMullerSampler(rng), item_mean, item_sd, lower, upper, item_count)
    return TestScores(items=items, total=int(items.sum()))


def generate_dataset(
    config: GeneratorConfig,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> GeneratedDataset:
    """
    Simulate a dataset of config.sample_size respondents.

    Columns are ID (1..n), one column per demographic variable, then for
    each test its item columns <code>1..<code>k and Total_<code>.

    Parameters
    ----------
    config : GeneratorConfig
    rng : numpy.random.Generator, optional
        Uniform source for the Box-Muller draws.
    seed : int, optional
        Seed for a fresh default_rng; mutually exclusive with rng.

    Raises
    ------
    DuplicateColumnError
        If two variables produce the same column name.
    """
    generator = _resolve_rng(rng, seed)
    result = CPUDatasetBackend(generator).solve(config)
    return GeneratedDataset(_result=result, _config=config)
