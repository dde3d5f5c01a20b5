"""
fit_q option module

- options: option set of the moving-window regression fitter and its checks
"""

from .options import (
    FitQOptions,
    fit_q_parameter_names,
    check_fit_q_args,
)

__all__ = [
    'FitQOptions',
    'fit_q_parameter_names',
    'check_fit_q_args',
]
