"""
Tests for the PySimStats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySimStatsError)
    - Diagnostic attributes on the data and configuration errors
    - Default attribute values
"""

import pytest

from pysimstats.core.exceptions import (
    ConvergenceError,
    DimensionError,
    DuplicateColumnError,
    EmptySampleError,
    InsufficientDataError,
    InvalidConfigurationError,
    LengthMismatchError,
    NumericalError,
    PySimStatsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySimStatsError."""

    @pytest.mark.parametrize("exc_type, parent", [
        (ValidationError, PySimStatsError),
        (DimensionError, ValidationError),
        (LengthMismatchError, DimensionError),
        (EmptySampleError, ValidationError),
        (InsufficientDataError, ValidationError),
        (InvalidConfigurationError, ValidationError),
        (DuplicateColumnError, InvalidConfigurationError),
        (NumericalError, PySimStatsError),
        (ConvergenceError, NumericalError),
    ])
    def test_subclass(self, exc_type, parent):
        assert issubclass(exc_type, parent)
        assert issubclass(exc_type, PySimStatsError)

    def test_length_mismatch_caught_as_validation_error(self):
        with pytest.raises(ValidationError):
            raise LengthMismatchError("x=3, y=4", lengths={'x': 3, 'y': 4})


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_length_mismatch_lengths(self):
        err = LengthMismatchError("bad", lengths={'x': 3, 'y': 4})
        assert err.lengths == {'x': 3, 'y': 4}
        assert str(err) == "bad"

    def test_length_mismatch_default(self):
        assert LengthMismatchError("bad").lengths == {}

    def test_empty_sample_name(self):
        assert EmptySampleError("empty", name="age").name == "age"

    def test_insufficient_data(self):
        err = InsufficientDataError("too few", n=2, required=3)
        assert err.n == 2
        assert err.required == 3

    def test_insufficient_data_defaults(self):
        err = InsufficientDataError("too few")
        assert err.n is None
        assert err.required is None

    def test_invalid_configuration(self):
        err = InvalidConfigurationError("sd must be > 0", field='sd', value=0)
        assert err.field == 'sd'
        assert err.value == 0

    def test_duplicate_column(self):
        err = DuplicateColumnError(
            "collision", column='WE', sources=('Work Engagement', 'Wellbeing Evaluation')
        )
        assert err.column == 'WE'
        assert err.sources == ('Work Engagement', 'Wellbeing Evaluation')
        assert err.field == 'name'
        assert err.value == 'WE'

    def test_convergence_error(self):
        err = ConvergenceError("no convergence", iterations=1000, final_change=1e-3, threshold=1e-12)
        assert err.iterations == 1000
        assert err.final_change == 1e-3
        assert err.threshold == 1e-12
