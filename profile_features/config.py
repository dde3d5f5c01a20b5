"""
Configuration - defaults shared by the argument checks

This module collects every constant the validation layer relies on:
minimum table size, the default summary statistics, scaling defaults
and the package log level.
"""

import logging


# ============================================================
# Basic settings
# ============================================================

CONFIG = {
    # ===== Data =====
    'MIN_ROWS': 3,                         # a table needs more than 2 rows

    # ===== Summary statistics =====
    'DEFAULT_STATS': ('min', 'q1', 'mean', 'med', 'q3', 'max', 'sd', 'count'),
    'QUANTILE_METHOD': 'linear',           # numpy quantile interpolation
    'SD_DDOF': 1,                          # sample standard deviation

    # ===== Center / scale =====
    'DEFAULT_CENTER_SCALE': True,

    # ===== Output =====
    'LOG_LEVEL': logging.WARNING,
}


# ============================================================
# Statistic names, in default order
# ============================================================

DEFAULT_STATS = CONFIG['DEFAULT_STATS']


def get_config(key=None):
    """
    Get a configuration value

    Args:
        key (str, optional): Setting name. Returns a copy of all settings when None

    Returns:
        The setting value (the whole dict when key is None)
    """
    if key is None:
        return CONFIG.copy()
    return CONFIG.get(key)


def update_config(key, value):
    """
    Update a configuration value

    Args:
        key (str): Setting name
        value: New value

    Raises:
        KeyError: If the setting does not exist
    """
    if key not in CONFIG:
        raise KeyError(f"Unknown configuration key: {key}")
    CONFIG[key] = value
