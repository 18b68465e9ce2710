"""
Simulated psychometric datasets.

Normal draws via Box-Muller, clamped and rounded into Likert-style item
scores and demographic variables.
"""

from pysimstats.simulation._common import TestScores, short_code, round_half_up
from pysimstats.simulation.design import (
    PsychometricTestConfig,
    DemographicConfig,
    GeneratorConfig,
)
from pysimstats.simulation.solution import GeneratedDataset
from pysimstats.simulation.solvers import (
    generate_normal,
    generate_test_scores,
    generate_dataset,
)

__all__ = [
    "generate_normal",
    "generate_test_scores",
    "generate_dataset",
    "short_code",
    "round_half_up",
    "TestScores",
    "PsychometricTestConfig",
    "DemographicConfig",
    "GeneratorConfig",
    "GeneratedDataset",
]
