"""
Tests for the data generator.

Validates:
    - Box-Muller draws and injectable randomness
    - Item clamping, half-up rounding and totals
    - Dataset layout, demographic clamping and decimals
    - Seeded reproducibility
"""

import math

import numpy as np
import pytest

from pysimstats.simulation import (
    DemographicConfig,
    GeneratorConfig,
    PsychometricTestConfig,
    generate_dataset,
    generate_normal,
    generate_test_scores,
    round_half_up,
)
from pysimstats.simulation.backends.cpu import BoxMullerSampler
from pysimstats.core.exceptions import InvalidConfigurationError


class ScriptedUniforms:
    """Stand-in Generator returning scripted uniform draws."""

    def __init__(self, values):
        self._values = list(values)

    def random(self, size):
        out = np.array(self._values[:size], dtype=np.float64)
        del self._values[:size]
        return out


@pytest.fixture
def config():
    return GeneratorConfig(
        sample_size=50,
        tests=(
            PsychometricTestConfig("Work Engagement Scale", item_count=4, mean=4, sd=1.5),
            PsychometricTestConfig("Burnout Inventory", item_count=3, mean=3, sd=1, min=1, max=5),
        ),
        demographics=(
            DemographicConfig("Age", mean=35, sd=10, min=18, max=65, decimal_places=0),
            DemographicConfig("Monthly Income", mean=1500, sd=400),
        ),
    )


# ═══════════════════════════════════════════════════════════════════════
# Box-Muller
# ═══════════════════════════════════════════════════════════════════════


class TestBoxMuller:

    def test_transform(self):
        rng = ScriptedUniforms([0.3, 0.8])
        expected = 5 + 2 * math.sqrt(-2 * math.log(0.3)) * math.cos(2 * math.pi * 0.8)
        assert generate_normal(5, 2, rng=rng) == pytest.approx(expected, rel=1e-15)

    def test_zero_u1_redrawn(self):
        rng = ScriptedUniforms([0.0, 0.5, 0.25])
        z = BoxMullerSampler(rng).standard_normal(1)[0]
        expected = math.sqrt(-2 * math.log(0.5)) * math.cos(2 * math.pi * 0.25)
        assert z == pytest.approx(expected, abs=1e-15)
        assert np.isfinite(z)

    def test_zero_sd_is_mean(self, rng):
        assert generate_normal(10, 0, rng=rng) == 10.0

    def test_moments(self, rng):
        draws = BoxMullerSampler(rng).normal(0.0, 1.0, 20_000)
        assert abs(draws.mean()) < 0.05
        assert abs(draws.std(ddof=1) - 1.0) < 0.05

    def test_seeded_reproducible(self):
        a = generate_normal(rng=np.random.default_rng(11))
        b = generate_normal(rng=np.random.default_rng(11))
        assert a == b


# ═══════════════════════════════════════════════════════════════════════
# Test scores
# ═══════════════════════════════════════════════════════════════════════


class TestTestScores:

    def test_degenerate_sd(self, rng):
        scores = generate_test_scores(20, 50, 0, 1, 100, rng=rng)
        assert scores.items.tolist() == [50] * 20
        assert scores.total == 1000

    def test_clamped_to_max(self, rng):
        scores = generate_test_scores(10, 100, 1, rng=rng)
        assert scores.items.tolist() == [7] * 10
        assert scores.total == 70

    def test_within_bounds_and_integer(self, rng):
        scores = generate_test_scores(200, 3, 2, 1, 5, rng=rng)
        assert scores.items.min() >= 1
        assert scores.items.max() <= 5
        assert scores.items.dtype.kind == 'i'
        assert scores.total == scores.items.sum()

    def test_none_bounds_default_to_likert(self, rng):
        scores = generate_test_scores(50, 4, 5, None, None, rng=rng)
        assert set(scores.items.tolist()) <= set(range(1, 8))

    @pytest.mark.parametrize("args", [(0, 3, 1), (2.5, 3, 1), (5, 3, -1), (5, 3, 1, 5, 5)])
    def test_invalid(self, args):
        with pytest.raises(InvalidConfigurationError):
            generate_test_scores(*args)


class TestRoundHalfUp:

    def test_halves_round_up(self):
        np.testing.assert_array_equal(round_half_up([0.5, 1.5, 2.5, -0.5, -1.5]), [1, 2, 3, 0, -1])

    def test_decimals(self):
        np.testing.assert_allclose(round_half_up([1.25, 3.14159], 1), [1.3, 3.1])


# ═══════════════════════════════════════════════════════════════════════
# Datasets
# ═══════════════════════════════════════════════════════════════════════


class TestDataset:

    def test_column_layout(self, config):
        data = generate_dataset(config, seed=1)
        assert data.columns == (
            'ID', 'A', 'MI',
            'WES1', 'WES2', 'WES3', 'WES4', 'Total_WES',
            'BI1', 'BI2', 'BI3', 'Total_BI',
        )
        assert data.numeric_columns == data.columns[1:]

    def test_ids(self, config):
        data = generate_dataset(config, seed=1)
        assert data.column('ID').tolist() == list(range(1, 51))
        assert [row['ID'] for row in data.rows] == list(range(1, 51))
        assert len(data) == 50

    def test_totals_are_item_sums(self, config):
        data = generate_dataset(config, seed=2)
        items = sum(data.column(f'BI{k}') for k in (1, 2, 3))
        np.testing.assert_array_equal(data.column('Total_BI'), items)

    def test_items_within_bounds(self, config):
        data = generate_dataset(config, seed=3)
        for k in (1, 2, 3):
            col = data.column(f'BI{k}')
            assert col.min() >= 1 and col.max() <= 5
        for k in (1, 2, 3, 4):
            col = data.column(f'WES{k}')
            assert col.min() >= 1 and col.max() <= 7

    def test_demographic_clamped_and_rounded(self, config):
        data = generate_dataset(config, seed=4)
        age = data.column('A')
        assert age.dtype.kind == 'i'
        assert age.min() >= 18 and age.max() <= 65
        income = data.column('MI')
        np.testing.assert_allclose(income * 100, np.round(income * 100), atol=1e-6)

    def test_seed_reproducible(self, config):
        a = generate_dataset(config, seed=42)
        b = generate_dataset(config, seed=42)
        assert a.to_records() == b.to_records()

    def test_rng_reproducible(self, config):
        a = generate_dataset(config, rng=np.random.default_rng(9))
        b = generate_dataset(config, rng=np.random.default_rng(9))
        assert a.to_csv() == b.to_csv()

    def test_rng_and_seed_exclusive(self, config, rng):
        with pytest.raises(ValueError):
            generate_dataset(config, rng=rng, seed=1)

    def test_columns_read_only(self, config):
        data = generate_dataset(config, seed=5)
        with pytest.raises(ValueError):
            data.column('A')[0] = 0

    def test_no_variables(self):
        data = generate_dataset(GeneratorConfig(sample_size=40), seed=0)
        assert data.columns == ('ID',)
        assert data.rows[0] == {'ID': 1}
