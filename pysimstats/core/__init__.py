"""
Core infrastructure for PySimStats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, normality, correlation, simulation).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: Frozen configuration records
    compute: Special functions, timing, tolerance tiers
"""

from pysimstats.core.result import Result
from pysimstats.core.exceptions import (
    PySimStatsError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    EmptySampleError,
    InsufficientDataError,
    InvalidConfigurationError,
    DuplicateColumnError,
    NumericalError,
    ConvergenceError,
)
from pysimstats.core.config import (
    NormalityConfig,
    CorrelationConfig,
    CorrelationThresholds,
    GeneratorLimits,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySimStatsError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "EmptySampleError",
    "InsufficientDataError",
    "InvalidConfigurationError",
    "DuplicateColumnError",
    "NumericalError",
    "ConvergenceError",
    # Configuration
    "NormalityConfig",
    "CorrelationConfig",
    "CorrelationThresholds",
    "GeneratorLimits",
]
