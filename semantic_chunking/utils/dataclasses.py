# -*- coding: utf-8 -*-
"""
Core data structures for the semantic chunker.

Examples:
    from semantic_chunking.utils.dataclasses import Chunk, BreakpointThresholdType

    threshold_type = BreakpointThresholdType.from_value("gradient")
    chunk = Chunk(id="9f1c...", text="First sentence. Second.", embedding=vector)

"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

import numpy as np

from semantic_chunking.utils.errors import InvalidConfigurationError


# ============================================================================
# ENUMS
# ============================================================================

class BreakpointThresholdType(Enum):
    """Statistic used to turn the distance sequence into a breakpoint threshold."""
    PERCENTILE = "percentile"
    STANDARD_DEVIATION = "standard_deviation"
    INTERQUARTILE = "interquartile"
    GRADIENT = "gradient"

    @classmethod
    def from_value(cls, value: Union['BreakpointThresholdType', str]) -> 'BreakpointThresholdType':
        """
        Coerce an enum member or its string value (case-insensitive).

        Raises:
            InvalidConfigurationError: If the value names no strategy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidConfigurationError(
            f"Unknown breakpoint threshold type: {value!r} "
            f"(expected one of {[m.value for m in cls]})"
        )


# ============================================================================
# CHUNKS
# ============================================================================

@dataclass(frozen=True)
class Chunk:
    """
    Final output unit of the chunker.

    The embedding is computed for ``text`` itself, never reused from the
    contextual sentence embeddings used for boundary detection.
    """
    id: str
    text: str
    embedding: np.ndarray

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (embedding as a list of floats)."""
        return {
            'id': self.id,
            'text': self.text,
            'embedding': np.asarray(self.embedding, dtype=float).tolist(),
        }
