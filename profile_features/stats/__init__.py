"""
Summary statistics module

- summary_stats: statistic names -> reusable SummaryStats callable
"""

from .summary_stats import (
    SummaryStat,
    SummaryStats,
    summary_stats,
)

__all__ = [
    'SummaryStat',
    'SummaryStats',
    'summary_stats',
]
