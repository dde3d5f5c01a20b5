import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def frame() -> pd.DataFrame:
    """Five time-ordered rows: two numeric columns around one text column."""
    return pd.DataFrame(
        {
            'a': [1.0, 2.0, 3.0, 4.0, 5.0],
            'b': ['x', 'y', 'x', 'z', 'y'],
            'c': [10, 20, 30, 40, 60],
        }
    )


@pytest.fixture
def wide_frame() -> pd.DataFrame:
    rng = np.random.default_rng(42)
    return pd.DataFrame(
        {
            'time': np.arange(50),
            'temp': rng.normal(20.0, 3.0, 50),
            'state': rng.choice(['on', 'off'], 50),
            'pressure': rng.normal(1.0, 0.1, 50),
            'alarm': rng.integers(0, 2, 50),
        }
    )
