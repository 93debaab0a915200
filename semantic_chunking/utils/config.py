# -*- coding: utf-8 -*-
"""
Module: config.py
Package: semantic_chunking.utils
Purpose: Default chunking parameters, overridable from the environment

Values are read once at import time. A ``.env`` file in the working
directory is honoured through python-dotenv, so deployments can tune the
chunker without code changes. Explicit constructor arguments on
SemanticChunker always win over anything defined here.
"""

# Standard library
import os
from types import MappingProxyType
from typing import Optional

# Third-party
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value not in (None, '') else default


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value not in (None, '') else default


# ============================================================================
# SIZE HEURISTICS
# ============================================================================

# Characters per token (rough average for Latin-script text)
CHARS_PER_TOKEN = 4

# Keep 10% headroom below the token limit
SAFETY_MARGIN = 0.9


# ============================================================================
# THRESHOLD DEFAULTS
# ============================================================================

# Keyed by BreakpointThresholdType value; frozen so nothing mutates it at runtime
DEFAULT_THRESHOLD_AMOUNTS = MappingProxyType({
    'percentile': 95.0,
    'standard_deviation': 3.0,
    'interquartile': 1.5,
    'gradient': 95.0,
})


# ============================================================================
# CHUNKING
# ============================================================================

CHUNKING_CONFIG = {
    # Sentences on each side of the centre sentence used for context embeddings
    'buffer_size': _env_int('SEMCHUNK_BUFFER_SIZE', 1),

    # Breakpoint strategy and its parameter (None = strategy default)
    'threshold_type': os.getenv('SEMCHUNK_THRESHOLD_TYPE', 'percentile'),
    'threshold_amount': _env_float('SEMCHUNK_THRESHOLD_AMOUNT', None),

    # Chunks shorter than this (in characters) are dropped
    'min_chunk_chars': _env_int('SEMCHUNK_MIN_CHUNK_CHARS', 0),

    # Newline search window past the size limit; 0 = always hard-cut
    'max_overrun_chars': _env_int('SEMCHUNK_MAX_OVERRUN_CHARS', 200),

    # NLTK Punkt language model
    'language': os.getenv('SEMCHUNK_LANGUAGE', 'english'),
}


# ============================================================================
# EMBEDDING
# ============================================================================

EMBEDDING_CONFIG = {
    'model_name': os.getenv('SEMCHUNK_EMBEDDING_MODEL', 'BAAI/bge-small-en-v1.5'),
    'device': os.getenv('SEMCHUNK_EMBEDDING_DEVICE') or None,
    'normalize': True,
}
