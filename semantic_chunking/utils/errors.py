# -*- coding: utf-8 -*-
"""
Exception types raised by the chunking engine.

Configuration and input errors double as ValueError so callers that already
catch ValueError keep working. Failures coming from the embedding generator
are never wrapped; they reach the caller as raised.
"""
import asyncio


class ChunkingError(Exception):
    """Base class for all chunking errors."""


class InvalidConfigurationError(ChunkingError, ValueError):
    """Chunker constructed with an unusable option (e.g. unknown strategy)."""


class InvalidInputError(ChunkingError, ValueError):
    """Numeric helper received data it cannot work with (e.g. vector length mismatch)."""


class ChunkingCancelledError(asyncio.CancelledError):
    """The caller's cancel event fired while embeddings were being requested."""
