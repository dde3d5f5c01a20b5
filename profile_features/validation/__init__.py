"""
Argument validation module

This package checks the arguments of get_features() once, before any
feature is extracted.

Module layout:
- args_checker: table / selector / stats / fit_q option checks and the
  ValidGetFeaturesArgs result
"""

from .args_checker import (
    ValidGetFeaturesArgs,
    check_get_features_args,
    center_scale,
    ensure_valid_args,
)

__all__ = [
    'ValidGetFeaturesArgs',
    'check_get_features_args',
    'center_scale',
    'ensure_valid_args',
]
