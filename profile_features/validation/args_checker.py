"""Check and validate arguments for get_features() and its grouped variant.

The checks run once, before feature extraction, so that repeated calls
to get_features (one per group of a grouped table, for example) do not
repeat them on essentially the same arguments.

Checks, in order:
1. 'data' is a DataFrame with more than 2 rows and unique column names
2. at least one of 'cont' / 'disc' is given
3. 'stats' is statistic names or a resolved SummaryStats
4. 'center_scale' is a single boolean
5. 'cont' / 'disc' resolve to column names of 'data'
6. every 'cont' column is numeric
7. 'fit_q_args' holds only fit_q options with valid values

The result is a ``ValidGetFeaturesArgs`` that get_features accepts
without checking again.
"""

import dataclasses
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype
from scipy import stats as sp_stats

from ..config import CONFIG
from ..exceptions import (
    ArgumentValidationError,
    InvalidFitOptionsError,
    InvalidFlagError,
    InvalidStatsSpecError,
    MissingSelectorError,
    NonNumericColumnError,
    OverlappingSelectorError,
    SelectorNameError,
    StructuralError,
    UnrecognizedFitOptionError,
    format_values,
)
from ..fit_q import FitQOptions, check_fit_q_args
from ..logger import log_debug, log_warning
from ..selectors import resolve_selector
from ..stats import SummaryStats, summary_stats


@dataclass(frozen=True, eq=False)
class ValidGetFeaturesArgs:
    """Arguments for get_features that have passed every check.

    Attributes:
        data: Table, with continuous columns centered and scaled if requested
        cont: Names of the continuous columns, or None
        disc: Names of the discrete columns, or None
        stats: Resolved summary statistics
        fit_q_args: Checked fit_q options, or None for fit_q defaults
    """

    data: pd.DataFrame
    cont: Optional[Tuple[Any, ...]]
    disc: Optional[Tuple[Any, ...]]
    stats: SummaryStats
    fit_q_args: Optional[FitQOptions] = None

    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, ValidGetFeaturesArgs):
            return NotImplemented
        return (
            self.data.equals(other.data)
            and list(self.data.columns) == list(other.data.columns)
            and self.cont == other.cont
            and self.disc == other.disc
            and self.stats == other.stats
            and self.fit_q_args == other.fit_q_args
        )

    @property
    def variables(self) -> Tuple[Any, ...]:
        """Continuous then discrete column names."""
        return (self.cont or ()) + (self.disc or ())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'data': self.data,
            'cont': self.cont,
            'disc': self.disc,
            'stats': self.stats,
            'fit_q_args': self.fit_q_args,
        }

    def with_data(self, data: pd.DataFrame) -> 'ValidGetFeaturesArgs':
        """Reuse the checked arguments for another table.

        Meant for subsets of the validated table (one group of rows, say).
        The table is used as is: no scaling is applied to it.

        Raises:
            StructuralError: If ``data`` is not a DataFrame
            SelectorNameError: If selected columns are missing from ``data``
        """
        if not isinstance(data, pd.DataFrame):
            raise StructuralError(
                f"'data' must be a pandas DataFrame, got {type(data).__name__}",
                parameter='data',
                values=type(data).__name__,
            )

        known = set(data.columns)
        missing = list(dict.fromkeys(v for v in self.variables if v not in known))
        if missing:
            raise SelectorNameError(
                f"Columns {format_values(missing)} selected for feature extraction "
                f"are not in the column names of 'data'",
                parameter='data',
                values=missing,
            )

        return dataclasses.replace(self, data=data)


# ============================================================
# Helpers
# ============================================================

def _is_absent(selector: Any) -> bool:
    if selector is None:
        return True
    if isinstance(selector, str):
        return False
    try:
        return len(selector) == 0
    except TypeError:
        return False


def _is_stat_names(value: Any) -> bool:
    if isinstance(value, str):
        return True
    if isinstance(value, (Mapping, bytes)) or not isinstance(value, (Sequence, np.ndarray, pd.Index)):
        return False
    return all(isinstance(v, str) for v in value)


def center_scale(data: pd.DataFrame, columns: Sequence[Any]) -> pd.DataFrame:
    """Replace columns by their global z-scores.

    Each value ``v`` becomes ``(v - mean) / sd`` over all values of its
    column (sample standard deviation). Other columns and the column
    order are left as they are. Returns a new DataFrame.

    Args:
        data: Table to transform; not modified
        columns: Numeric columns to center and scale

    Returns:
        pd.DataFrame: Copy of ``data`` with ``columns`` scaled
    """
    out = data.copy()

    for col in dict.fromkeys(columns):
        values = out[col].to_numpy(dtype=float, na_value=np.nan)

        # a zero or undefined sd shows up as non-finite scores
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', RuntimeWarning)
            scaled = sp_stats.zscore(values, ddof=CONFIG['SD_DDOF'], nan_policy='omit')

        observed = ~np.isnan(values)
        if not observed.any() or not np.isfinite(scaled[observed]).all():
            log_warning(f"Column '{col}' has no variation; its centered and scaled values are NaN")
            scaled = np.full(len(values), np.nan)

        out[col] = scaled

    return out


def _check_fit_q_args(fit_q_args: Any) -> Optional[FitQOptions]:
    if fit_q_args is None or isinstance(fit_q_args, FitQOptions):
        return fit_q_args

    if not isinstance(fit_q_args, Mapping):
        raise InvalidFitOptionsError(
            f"'fit_q_args' must be a mapping of fit_q option names to values, "
            f"got {type(fit_q_args).__name__}",
            parameter='fit_q_args',
            values=fit_q_args,
        )

    # fit_q option names are keywords, so non-string keys never match one
    not_names = [k for k in fit_q_args if not isinstance(k, str)]
    if not_names:
        raise UnrecognizedFitOptionError(
            f"{format_values(not_names)} are not valid arguments for fit_q()",
            parameter='fit_q_args',
            values=not_names,
        )

    try:
        return check_fit_q_args(**fit_q_args)
    except UnrecognizedFitOptionError as e:
        raise UnrecognizedFitOptionError(
            f"{format_values(e.values)} are not valid arguments for fit_q()",
            parameter='fit_q_args',
            values=e.values,
        ) from e


# ============================================================
# Main check
# ============================================================

def check_get_features_args(
    data: pd.DataFrame,
    cont: Any = None,
    disc: Any = None,
    center_scale: bool = CONFIG['DEFAULT_CENTER_SCALE'],
    stats: Any = CONFIG['DEFAULT_STATS'],
    fit_q_args: Optional[Mapping] = None
) -> ValidGetFeaturesArgs:
    """Check and validate arguments for get_features().

    Args:
        data: DataFrame, each row a vector of measurements for one point in
            time, rows ordered chronologically
        cont: Column names or 1-based column numbers of the continuous
            variables (features come from moving regression fits)
        disc: Column names or 1-based column numbers of the discrete
            variables
        center_scale: Center and scale each continuous variable by its
            global mean and standard deviation
        stats: Statistic names passed to ``summary_stats``, or the
            ``SummaryStats`` it returns
        fit_q_args: Options for fit_q; None keeps fit_q defaults

    Returns:
        ValidGetFeaturesArgs: data (scaled if requested), column names for
        'cont' and 'disc', resolved stats and checked fit_q options

    Raises:
        ArgumentValidationError: On the first failed check (see
            ``profile_features.exceptions`` for the subclasses)
    """
    try:
        args = _check_get_features_args(data, cont, disc, center_scale, stats, fit_q_args)
    except ArgumentValidationError as e:
        log_debug(f"get_features argument check failed ({type(e).__name__}): {e}")
        raise

    log_debug(
        f"get_features arguments OK: rows={len(args.data)}, cont={args.cont}, "
        f"disc={args.disc}, stats={args.stats.names}, fit_q_args={args.fit_q_args}"
    )
    return args


def _check_get_features_args(data, cont, disc, center_scale_flag, stats, fit_q_args):
    # =========================================
    # 1. Structural checks
    # =========================================
    if not isinstance(data, pd.DataFrame):
        raise StructuralError(
            f"'data' must be a pandas DataFrame, got {type(data).__name__}",
            parameter='data',
            values=type(data).__name__,
        )

    if len(data) < CONFIG['MIN_ROWS']:
        raise StructuralError(
            f"'data' must have more than {CONFIG['MIN_ROWS'] - 1} rows, got {len(data)}",
            parameter='data',
            values=len(data),
        )

    duplicated = list(dict.fromkeys(data.columns[data.columns.duplicated()]))
    if duplicated:
        raise StructuralError(
            f"Column names of 'data' must be unique; repeated: {format_values(duplicated)}",
            parameter='data',
            values=duplicated,
        )

    if _is_absent(cont) and _is_absent(disc):
        raise MissingSelectorError(
            "At least one of 'cont' or 'disc' must be given",
            parameter='cont',
            values=None,
        )

    if not (isinstance(stats, SummaryStats) or _is_stat_names(stats)):
        raise InvalidStatsSpecError(
            f"'stats' must be statistic names or a SummaryStats object, got {type(stats).__name__}",
            parameter='stats',
            values=stats,
        )

    if not isinstance(center_scale_flag, (bool, np.bool_)):
        raise InvalidFlagError(
            f"'center_scale' must be a single boolean, got {center_scale_flag!r}",
            parameter='center_scale',
            values=center_scale_flag,
        )

    # =========================================
    # 2. Resolve 'cont' and 'disc'
    # =========================================
    columns = list(data.columns)
    cont = resolve_selector(cont, columns, name='cont')
    disc = resolve_selector(disc, columns, name='disc')

    if cont and disc:
        both = [c for c in dict.fromkeys(cont) if c in set(disc)]
        if both:
            raise OverlappingSelectorError(
                f"Columns {format_values(both)} are given in both 'cont' and 'disc'",
                parameter='disc',
                values=both,
            )

    # continuous variables must be numeric
    if cont:
        not_numeric = [
            c for c in dict.fromkeys(cont)
            if not is_numeric_dtype(data[c]) or is_bool_dtype(data[c])
        ]
        if not_numeric:
            raise NonNumericColumnError(
                f"The following columns indicated in 'cont' are not numeric: {format_values(not_numeric)}",
                parameter='cont',
                values=not_numeric,
            )

    # =========================================
    # 3. Center and scale
    # =========================================
    if cont and center_scale_flag:
        data = center_scale(data, cont)

    # =========================================
    # 4. Summary statistics (resolved only once)
    # =========================================
    if not isinstance(stats, SummaryStats):
        stats = summary_stats(stats)

    # =========================================
    # 5. fit_q options
    # =========================================
    fit_q_args = _check_fit_q_args(fit_q_args)

    return ValidGetFeaturesArgs(
        data=data,
        cont=cont,
        disc=disc,
        stats=stats,
        fit_q_args=fit_q_args,
    )


def ensure_valid_args(args: Optional[ValidGetFeaturesArgs] = None, **kwargs) -> ValidGetFeaturesArgs:
    """Return checked arguments, checking them only if needed.

    Args:
        args: Result of an earlier ``check_get_features_args`` call
        **kwargs: Arguments for ``check_get_features_args`` when ``args`` is None

    Returns:
        ValidGetFeaturesArgs

    Raises:
        TypeError: If both ``args`` and keyword arguments are given, or
            ``args`` is not a ValidGetFeaturesArgs
    """
    if args is None:
        return check_get_features_args(**kwargs)

    if kwargs:
        raise TypeError(
            "Pass either checked arguments or arguments to check, not both: "
            f"{', '.join(kwargs)}"
        )

    if not isinstance(args, ValidGetFeaturesArgs):
        raise TypeError(
            f"'args' must come from check_get_features_args(), got {type(args).__name__}"
        )

    return args
