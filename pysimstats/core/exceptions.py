"""
Exception hierarchy for PySimStats.

All exceptions inherit from PySimStatsError to allow catching any
library-specific error. Domain-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySimStatsError(Exception):
    """Base exception for all PySimStats errors."""
    pass


class ValidationError(PySimStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired samples have unequal lengths.

    Raised by covariance and correlation, which need one observation
    of each variable per unit.

    Attributes:
        lengths: Mapping of parameter name to observed length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths or {}


class EmptySampleError(ValidationError):
    """
    Sample has no observations.

    Raised by statistics that need at least one value (mean, percentiles).

    Attributes:
        name: Parameter name of the empty sample
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientDataError(ValidationError):
    """
    Sample is smaller than the requested test supports.

    Normality tests and correlation need n >= 3. Skewness and kurtosis
    never raise this; they return 0 below their minimum n.

    Attributes:
        n: Number of observations supplied
        required: Minimum number of observations needed
    """

    def __init__(self, message: str, n: int | None = None, required: int | None = None):
        super().__init__(message)
        self.n = n
        self.required = required


class InvalidConfigurationError(ValidationError):
    """
    Data generator configuration is invalid.

    Raised for sd <= 0, item_count < 1, min >= max, decimal places out of
    range, or a sample size below the minimum.

    Attributes:
        field: Name of the offending configuration field
        value: The rejected value
    """

    def __init__(self, message: str, field: str | None = None, value: object = None):
        super().__init__(message)
        self.field = field
        self.value = value


class DuplicateColumnError(InvalidConfigurationError):
    """
    Two configured variables reduce to the same column code.

    Short codes are built from initials, so distinct names such as
    "Work Engagement" and "Wellbeing Evaluation" both become "WE".

    Attributes:
        column: The colliding column name
        sources: Human-readable names that produced it
    """

    def __init__(
        self,
        message: str,
        column: str | None = None,
        sources: tuple[str, ...] = (),
    ):
        super().__init__(message, field='name', value=column)
        self.column = column
        self.sources = sources


class NumericalError(PySimStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when a series or continued-fraction evaluation does not meet
    its tolerance within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final relative change of the last term
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.threshold = threshold
