# -*- coding: utf-8 -*-
"""
Breakpoint thresholds and breakpoint detection.

A threshold comes from exactly one of two modes:

    Strategy mode      one of four statistics over the distance sequence,
                       parameterised by ``threshold_amount``
    Target-count mode  the desired number of chunks is mapped linearly onto
                       a percentile of the distances (more chunks -> lower
                       percentile -> more breaks)

Any distance strictly greater than the threshold ends a chunk after that
sentence.
"""
# Standard library
import logging
from typing import Optional, Sequence, Set, Union

# Foundation
from semantic_chunking.utils.dataclasses import BreakpointThresholdType
from semantic_chunking.utils.errors import InvalidConfigurationError
from semantic_chunking.utils.statistics import gradient, mean, percentile, standard_deviation

# Config
from semantic_chunking.utils.config import DEFAULT_THRESHOLD_AMOUNTS

logger = logging.getLogger(__name__)

# Percentiles at the two ends of the target-count mapping
PERCENTILE_AT_MAX_CHUNKS = 0.0
PERCENTILE_AT_MIN_CHUNKS = 100.0
MIN_CHUNKS = 1


def default_threshold_amount(threshold_type: BreakpointThresholdType) -> float:
    return DEFAULT_THRESHOLD_AMOUNTS[threshold_type.value]


def threshold_from_strategy(
    distances: Sequence[float],
    threshold_type: BreakpointThresholdType,
    amount: float
) -> float:
    """
    Compute the threshold with one of the four strategies.

    Raises:
        InvalidConfigurationError: If ``threshold_type`` is not a known strategy
    """
    if threshold_type is BreakpointThresholdType.PERCENTILE:
        return percentile(distances, amount)
    elif threshold_type is BreakpointThresholdType.STANDARD_DEVIATION:
        return mean(distances) + amount * standard_deviation(distances)
    elif threshold_type is BreakpointThresholdType.INTERQUARTILE:
        iqr = percentile(distances, 75) - percentile(distances, 25)
        return mean(distances) + amount * iqr
    elif threshold_type is BreakpointThresholdType.GRADIENT:
        return percentile(gradient(distances), amount)

    raise InvalidConfigurationError(f"Unknown breakpoint threshold type: {threshold_type!r}")


def threshold_from_target_count(distances: Sequence[float], desired_chunks: int) -> float:
    """
    Invert a desired chunk count into a threshold.

    The count is clamped to [1, len(distances) + 1]. The maximum (one chunk
    per sentence) returns -inf so every boundary breaks. Otherwise the count
    is interpolated from [1, max] onto percentile [100, 0].

    Example:
        >>> threshold_from_target_count([0.1, 0.5], 1)   # percentile 100
        0.5
        >>> threshold_from_target_count([0.1, 0.5], 3)
        -inf
    """
    max_chunks = len(distances) + 1
    clamped = min(max(desired_chunks, MIN_CHUNKS), max_chunks)

    if clamped == max_chunks:
        return float('-inf')

    mapped = PERCENTILE_AT_MAX_CHUNKS + (
        (PERCENTILE_AT_MIN_CHUNKS - PERCENTILE_AT_MAX_CHUNKS)
        * (clamped - max_chunks) / (MIN_CHUNKS - max_chunks)
    )
    logger.debug(f"Target of {desired_chunks} chunks (clamped {clamped}) -> percentile {mapped:.2f}")

    return percentile(distances, mapped)


def detect_breakpoints(distances: Sequence[float], threshold: float) -> Set[int]:
    """Indices whose trailing distance is strictly above ``threshold``."""
    return {i for i, distance in enumerate(distances) if distance > threshold}


class ThresholdCalculator:
    """
    Immutable threshold configuration.

    ``target_chunk_count``, when given, overrides the strategy entirely.
    """

    def __init__(
        self,
        threshold_type: Union[BreakpointThresholdType, str] = BreakpointThresholdType.PERCENTILE,
        threshold_amount: Optional[float] = None,
        target_chunk_count: Optional[int] = None
    ):
        self._threshold_type = BreakpointThresholdType.from_value(threshold_type)
        self._threshold_amount = (
            float(threshold_amount) if threshold_amount is not None
            else default_threshold_amount(self._threshold_type)
        )
        self._target_chunk_count = target_chunk_count

    @property
    def threshold_type(self) -> BreakpointThresholdType:
        return self._threshold_type

    @property
    def threshold_amount(self) -> float:
        return self._threshold_amount

    @property
    def target_chunk_count(self) -> Optional[int]:
        return self._target_chunk_count

    def calculate(self, distances: Sequence[float]) -> float:
        if self._target_chunk_count is not None:
            return threshold_from_target_count(distances, self._target_chunk_count)
        return threshold_from_strategy(distances, self._threshold_type, self._threshold_amount)

    def __repr__(self) -> str:
        return (
            f"ThresholdCalculator(threshold_type={self._threshold_type.value!r}, "
            f"threshold_amount={self._threshold_amount}, "
            f"target_chunk_count={self._target_chunk_count})"
        )
