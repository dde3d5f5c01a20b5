"""Summary statistics computed for each regression parameter.

``summary_stats`` turns a list of statistic names into a ``SummaryStats``
object. The object is immutable and callable, so it is built once and
applied to every parameter series afterwards.

Recognized names (default order):
- min, q1, mean, med, q3, max, sd, count
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, Tuple, Union

import numpy as np
import pandas as pd

from ..config import CONFIG
from ..exceptions import InvalidStatsSpecError, format_values


class SummaryStat(Enum):
    """Statistics that can be requested by name."""

    MIN = 'min'
    Q1 = 'q1'
    MEAN = 'mean'
    MED = 'med'
    Q3 = 'q3'
    MAX = 'max'
    SD = 'sd'
    COUNT = 'count'


def _quantile(q: float) -> Callable[[np.ndarray], float]:
    def fn(x: np.ndarray) -> float:
        return float(np.quantile(x, q, method=CONFIG['QUANTILE_METHOD']))
    return fn


def _sd(x: np.ndarray) -> float:
    ddof = CONFIG['SD_DDOF']
    if len(x) <= ddof:
        return float('nan')
    return float(np.std(x, ddof=ddof))


# count is the only statistic defined on an empty series
_AGGREGATORS: Dict[SummaryStat, Callable[[np.ndarray], float]] = {
    SummaryStat.MIN: lambda x: float(np.min(x)),
    SummaryStat.Q1: _quantile(0.25),
    SummaryStat.MEAN: lambda x: float(np.mean(x)),
    SummaryStat.MED: lambda x: float(np.median(x)),
    SummaryStat.Q3: _quantile(0.75),
    SummaryStat.MAX: lambda x: float(np.max(x)),
    SummaryStat.SD: _sd,
    SummaryStat.COUNT: lambda x: len(x),
}


@dataclass(frozen=True)
class SummaryStats:
    """Resolved, reusable set of summary statistics.

    Calling the object on a 1-D array-like returns a ``pd.Series`` indexed
    by statistic name, in the order the statistics were requested. Missing
    values are dropped first; ``count`` is the number of remaining values.
    """

    stats: Tuple[SummaryStat, ...]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(s.value for s in self.stats)

    def __len__(self) -> int:
        return len(self.stats)

    def __iter__(self) -> Iterator[SummaryStat]:
        return iter(self.stats)

    def __call__(self, values) -> pd.Series:
        x = np.asarray(values, dtype=float).ravel()
        x = x[~np.isnan(x)]

        result = {}
        for stat in self.stats:
            if len(x) == 0 and stat is not SummaryStat.COUNT:
                result[stat.value] = float('nan')
            else:
                result[stat.value] = _AGGREGATORS[stat](x)

        return pd.Series(result, dtype=float)


def summary_stats(names: Union[str, Iterable[str]] = CONFIG['DEFAULT_STATS']) -> SummaryStats:
    """Build a ``SummaryStats`` from statistic names.

    Args:
        names: One name or a sequence of names from ``SummaryStat``

    Returns:
        SummaryStats computing the requested statistics in the given order

    Raises:
        InvalidStatsSpecError: If names are empty, unrecognized or repeated
    """
    if isinstance(names, str):
        names = [names]

    try:
        names = list(names)
    except TypeError:
        raise InvalidStatsSpecError(
            f"'stats' must be a sequence of statistic names, got {type(names).__name__}",
            parameter='stats',
            values=names,
        ) from None

    if not names:
        raise InvalidStatsSpecError(
            "'stats' must name at least one statistic",
            parameter='stats',
            values=names,
        )

    recognized = {s.value for s in SummaryStat}
    unknown = []
    for n in names:
        if (not isinstance(n, str) or n not in recognized) and n not in unknown:
            unknown.append(n)
    if unknown:
        raise InvalidStatsSpecError(
            f"Invalid values for 'stats': {format_values(unknown)}. "
            f"Recognized statistics are: {format_values(s.value for s in SummaryStat)}",
            parameter='stats',
            values=unknown,
        )

    repeated = [n for i, n in enumerate(names) if n in names[:i]]
    if repeated:
        raise InvalidStatsSpecError(
            f"Statistics requested more than once in 'stats': {format_values(dict.fromkeys(repeated))}",
            parameter='stats',
            values=list(dict.fromkeys(repeated)),
        )

    return SummaryStats(tuple(SummaryStat(n) for n in names))
