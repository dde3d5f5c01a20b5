"""Options accepted by the moving-window quadratic regression fitter (fit_q).

The fitter itself lives downstream; this module owns its option set and
the checks on option values. ``FitQOptions`` lists every option fit_q takes
after its data argument, so the set of recognized option names is read
from the dataclass fields.
"""

from dataclasses import asdict, dataclass, fields
from numbers import Integral
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..exceptions import DelegatedFitOptionError, UnrecognizedFitOptionError, format_values


@dataclass(frozen=True)
class FitQOptions:
    """Validated fit_q options.

    Attributes:
        window_size: Number of points in the moving window (odd, >= 3)
        min_window: Smallest window used at the edges of the series (odd,
            3 <= min_window <= window_size); None uses window_size
        linear_only: Fit a line instead of a quadratic
        start: 1-based row where fitting starts
        stride: Rows between consecutive window centres
        level_only: Keep only the fitted level, not slope/curvature
    """

    window_size: int = 7
    min_window: Optional[int] = None
    linear_only: bool = False
    start: int = 1
    stride: int = 1
    level_only: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def fit_q_parameter_names() -> Tuple[str, ...]:
    """Names of the options fit_q accepts besides its data argument."""
    return tuple(f.name for f in fields(FitQOptions))


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _reject(option: str, value: Any, requirement: str):
    raise DelegatedFitOptionError(
        f"Invalid value for fit_q option '{option}': {value!r} ({requirement})",
        parameter=option,
        values=value,
    )


def check_fit_q_args(**kwargs) -> FitQOptions:
    """Check option values for fit_q.

    Options that are not given keep their ``FitQOptions`` defaults.

    Args:
        **kwargs: Any subset of ``fit_q_parameter_names()``

    Returns:
        FitQOptions with the checked values

    Raises:
        UnrecognizedFitOptionError: If an option name is unknown
        DelegatedFitOptionError: If an option value is invalid
    """
    unknown = [k for k in kwargs if k not in fit_q_parameter_names()]
    if unknown:
        raise UnrecognizedFitOptionError(
            f"fit_q() got unexpected keyword arguments: {format_values(unknown)}",
            parameter=unknown[0],
            values=unknown,
        )

    defaults = FitQOptions()
    window_size = kwargs.get('window_size', defaults.window_size)
    min_window = kwargs.get('min_window', defaults.min_window)

    if not _is_int(window_size) or window_size < 3 or window_size % 2 == 0:
        _reject('window_size', window_size, 'must be an odd integer >= 3')

    if min_window is not None:
        if not _is_int(min_window) or min_window < 3 or min_window % 2 == 0:
            _reject('min_window', min_window, 'must be an odd integer >= 3')
        if min_window > window_size:
            _reject('min_window', min_window, f'must not exceed window_size ({window_size})')

    for option in ('start', 'stride'):
        value = kwargs.get(option, getattr(defaults, option))
        if not _is_int(value) or value < 1:
            _reject(option, value, 'must be a positive integer')

    for option in ('linear_only', 'level_only'):
        value = kwargs.get(option, getattr(defaults, option))
        if not _is_bool(value):
            _reject(option, value, 'must be a single boolean')

    return FitQOptions(
        window_size=int(window_size),
        min_window=None if min_window is None else int(min_window),
        linear_only=bool(kwargs.get('linear_only', defaults.linear_only)),
        start=int(kwargs.get('start', defaults.start)),
        stride=int(kwargs.get('stride', defaults.stride)),
        level_only=bool(kwargs.get('level_only', defaults.level_only)),
    )
