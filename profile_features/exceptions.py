"""Errors raised while checking arguments for feature extraction.

Every error names the offending parameter and the offending value(s).
Errors about the *type* of an argument also derive from ``TypeError``;
all of them derive from ``ValueError`` through ``ArgumentValidationError``.
"""

from typing import Any, Iterable, Optional


def format_values(values: Iterable[Any]) -> str:
    """Render offending values as ``'a', 'b'`` (strings) or ``1, 2`` (numbers)."""
    return ", ".join(repr(v) if isinstance(v, str) else str(v) for v in values)


class ArgumentValidationError(ValueError):
    """Base class for all argument validation failures."""

    def __init__(self, message: str, parameter: Optional[str] = None, values: Any = None):
        self.parameter = parameter
        self.values = values
        super().__init__(message)


class StructuralError(ArgumentValidationError, TypeError):
    """'data' is not a DataFrame, has too few rows, or repeats column names."""


class MissingSelectorError(ArgumentValidationError):
    """Neither 'cont' nor 'disc' was given."""


class InvalidStatsSpecError(ArgumentValidationError):
    """'stats' is neither statistic names nor a resolved SummaryStats."""


class InvalidFlagError(ArgumentValidationError, TypeError):
    """'center_scale' is not a single boolean."""


class SelectorTypeError(ArgumentValidationError, TypeError):
    """Selector entries are neither column names nor integer column numbers."""


class SelectorRangeError(ArgumentValidationError):
    """Column numbers outside [1, number of columns]."""


class SelectorNameError(ArgumentValidationError):
    """Column names not present in 'data'."""


class OverlappingSelectorError(ArgumentValidationError):
    """Columns selected as both continuous and discrete."""


class NonNumericColumnError(ArgumentValidationError):
    """Continuous columns that do not hold numbers."""


class InvalidFitOptionsError(ArgumentValidationError, TypeError):
    """'fit_q_args' is not a mapping of option names to values."""


class UnrecognizedFitOptionError(ArgumentValidationError):
    """'fit_q_args' keys that fit_q does not accept."""


class DelegatedFitOptionError(ArgumentValidationError):
    """check_fit_q_args rejected an option value."""
