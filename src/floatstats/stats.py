"""Descriptive statistics over a sequence of floats (stdlib only, no numpy needed).

Every function returns ``None`` when the statistic is undefined for the
input, never raises.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

# Any of the statistics below; ``None`` means "undefined for this input".
StatFn = Callable[[Sequence[float]], float | None]


def _total(values: Iterable[float]) -> float:
    """Correctly rounded sum, so the result does not depend on order."""
    values = list(values)
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        # inf - inf, or an intermediate overflow
        return sum(values)


def mean(nums: Sequence[float]) -> float | None:
    """Arithmetic mean. The mean of an empty sequence is ``0.0``."""
    if not nums:
        return 0.0
    return _total(nums) / len(nums)


def stddev(nums: Sequence[float]) -> float | None:
    """Population standard deviation (divides by N).

    Undefined for an empty sequence; a single value gives ``0.0``.
    """
    if not nums:
        return None
    m = mean(nums)
    variance = _total((m - x) * (m - x) for x in nums) / len(nums)
    return math.sqrt(variance)


def _nan_last(x: float) -> tuple[bool, float]:
    return (math.isnan(x), x)


def median(nums: Sequence[float]) -> float | None:
    """Middle value, taking the lower of the two middles for even lengths.

    Sorts a copy, so *nums* is left untouched. NaN values sort after
    every number. Undefined for an empty sequence.
    """
    if not nums:
        return None
    s = sorted(nums, key=_nan_last)
    return float(s[(len(s) - 1) // 2])


def l2(nums: Sequence[float]) -> float | None:
    """Euclidean norm. The L2 norm of an empty sequence is ``0.0``."""
    return math.sqrt(_total(x * x for x in nums))
