# -*- coding: utf-8 -*-
"""
Numeric primitives behind the breakpoint threshold strategies.

All helpers accept any sequence of numbers and work on float64 numpy
arrays internally. Empty input is a caller error (InvalidInputError); every
strategy operates on a distance sequence that has at least one element.
"""
# Standard library
import math
from typing import Sequence

# Third-party
import numpy as np

# Foundation
from semantic_chunking.utils.errors import InvalidInputError


def _as_array(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size == 0:
        raise InvalidInputError(f"{name} requires at least one value")
    return arr


def percentile(values: Sequence[float], p: float) -> float:
    """
    Linearly interpolated percentile.

    The rank ``r = (n - 1) * p / 100`` is taken over the sorted values and
    the result interpolated between positions ``floor(r)`` and ``floor(r) + 1``.
    For ``p`` outside [0, 100] the outermost pair of values is used with the
    same formula, i.e. the result is extrapolated rather than clipped.

    Args:
        values: Sample values (any order)
        p: Percentile, normally in [0, 100]

    Returns:
        Percentile value as float

    Example:
        >>> percentile([1.0, 2.0, 3.0, 4.0], 50)
        2.5
    """
    ordered = np.sort(_as_array(values, 'percentile'))
    n = ordered.size
    if n == 1:
        return float(ordered[0])

    rank = (n - 1) * p / 100.0
    lower = min(max(int(math.floor(rank)), 0), n - 2)
    fraction = rank - lower

    # Weighted form returns the exact endpoint when fraction is 0 or 1
    return float((1.0 - fraction) * ordered[lower] + fraction * ordered[lower + 1])


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    return float(np.mean(_as_array(values, 'mean')))


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (denominator N, not N - 1)."""
    return float(np.std(_as_array(values, 'standard_deviation'), ddof=0))


def gradient(values: Sequence[float]) -> np.ndarray:
    """
    Numerical gradient of a sequence.

    Central differences for interior points, forward difference at the first
    point and backward difference at the last one. With two values both
    slots hold ``v[1] - v[0]``; a single value has gradient ``[0.0]``.

    Example:
        >>> gradient([1.0, 2.0, 4.0]).tolist()
        [1.0, 1.5, 2.0]
    """
    arr = _as_array(values, 'gradient')
    if arr.size == 1:
        return np.zeros(1, dtype=np.float64)
    return np.gradient(arr)
