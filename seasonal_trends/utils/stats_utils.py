"""
Numeric helpers shared by the seasonal trends services.

Variances here are population variances (divide by N) and return 0 for fewer
than two values, so ratios built on them never divide by zero.
"""
import math
from typing import Sequence

import numpy as np


def population_variance(values: Sequence[float]) -> float:
    """Population variance, 0.0 for fewer than two values"""
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return 0.0
    return float(np.var(arr))


def population_std(values: Sequence[float]) -> float:
    return math.sqrt(population_variance(values))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up

    Python's built-in ``round`` rounds half to even, which would shift values
    such as 2.5 down to 2.
    """
    return int(math.floor(value + 0.5))


def centered_moving_average(values: Sequence[float], window: int) -> np.ndarray:
    """Centered moving average whose window shrinks at the series edges

    For index ``i`` the window covers ``[i - window // 2, i - window // 2 + window)``
    clipped to the bounds of ``values``.

    Example:
        ```python
        centered_moving_average([1, 2, 3, 4], 2)
        # array([1. , 1.5, 2.5, 3.5])
        ```
    """
    arr = np.asarray(values, dtype=float)
    n = arr.size
    if n == 0:
        return np.array([])
    window = max(1, int(window))

    # Prefix sums give each clipped window mean in O(1)
    cumulative = np.concatenate(([0.0], np.cumsum(arr)))
    idx = np.arange(n)
    starts = np.clip(idx - window // 2, 0, n)
    ends = np.clip(idx - window // 2 + window, 0, n)
    return (cumulative[ends] - cumulative[starts]) / (ends - starts)
