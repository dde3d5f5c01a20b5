"""
profile_features - argument checks for statistical feature extraction

This package checks and normalizes the arguments of get_features()
once, before features are extracted from time-ordered tables.

Main features:
- Table / column selector checks (names or 1-based column numbers)
- Global centering and scaling of continuous variables
- Summary statistic resolution (summary_stats)
- fit_q option checks

Basic usage:
```python
import pandas as pd
from profile_features import check_get_features_args

df = pd.DataFrame({'a': [1.0, 2.0, 4.0], 'b': ['x', 'y', 'x'], 'c': [3, 1, 2]})

args = check_get_features_args(
    df, cont=[1, 3], disc=['b'],
    stats=['mean', 'sd'], fit_q_args={'window_size': 5},
)
args.cont        # ('a', 'c')
args.stats(df['a'])
```
"""

__version__ = '1.0.0'

# Config / logger
from .config import (
    CONFIG,
    DEFAULT_STATS,
    get_config,
    update_config,
)

from .logger import (
    setup_logger,
    get_logger,
    log_debug,
    log_warning,
    set_log_level,
)

# Errors
from .exceptions import (
    ArgumentValidationError,
    StructuralError,
    MissingSelectorError,
    InvalidStatsSpecError,
    InvalidFlagError,
    SelectorTypeError,
    SelectorRangeError,
    SelectorNameError,
    OverlappingSelectorError,
    NonNumericColumnError,
    InvalidFitOptionsError,
    UnrecognizedFitOptionError,
    DelegatedFitOptionError,
)

# Selectors
from .selectors import (
    NameSelector,
    IndexSelector,
    as_selector,
    resolve_selector,
)

# Summary statistics
from .stats import (
    SummaryStat,
    SummaryStats,
    summary_stats,
)

# fit_q options
from .fit_q import (
    FitQOptions,
    fit_q_parameter_names,
    check_fit_q_args,
)

# Validation
from .validation import (
    ValidGetFeaturesArgs,
    check_get_features_args,
    center_scale,
    ensure_valid_args,
)


__all__ = [
    # version
    '__version__',
    # config
    'CONFIG',
    'DEFAULT_STATS',
    'get_config',
    'update_config',
    # logger
    'setup_logger',
    'get_logger',
    'log_debug',
    'log_warning',
    'set_log_level',
    # exceptions
    'ArgumentValidationError',
    'StructuralError',
    'MissingSelectorError',
    'InvalidStatsSpecError',
    'InvalidFlagError',
    'SelectorTypeError',
    'SelectorRangeError',
    'SelectorNameError',
    'OverlappingSelectorError',
    'NonNumericColumnError',
    'InvalidFitOptionsError',
    'UnrecognizedFitOptionError',
    'DelegatedFitOptionError',
    # selectors
    'NameSelector',
    'IndexSelector',
    'as_selector',
    'resolve_selector',
    # stats
    'SummaryStat',
    'SummaryStats',
    'summary_stats',
    # fit_q
    'FitQOptions',
    'fit_q_parameter_names',
    'check_fit_q_args',
    # validation
    'ValidGetFeaturesArgs',
    'check_get_features_args',
    'center_scale',
    'ensure_valid_args',
]
