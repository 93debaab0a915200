# -*- coding: utf-8 -*-
"""
Semantic chunking package.

Splits long text into chunks whose boundaries follow shifts in meaning,
measured as embedding distance between neighbouring sentence windows, and
whose size fits a downstream token budget.

Examples:
    from semantic_chunking import SemanticChunker, BGEEmbedder

    chunker = SemanticChunker(BGEEmbedder(), token_limit=512)
    chunks = await chunker.create_chunks(text)
"""
from semantic_chunking.processing.chunks.semantic_chunker import SemanticChunker
from semantic_chunking.utils.dataclasses import BreakpointThresholdType, Chunk
from semantic_chunking.utils.embedder import BGEEmbedder, EmbeddingGenerator
from semantic_chunking.utils.errors import (
    ChunkingCancelledError,
    ChunkingError,
    InvalidConfigurationError,
    InvalidInputError,
)

__all__ = [
    "SemanticChunker",
    "Chunk",
    "BreakpointThresholdType",
    "EmbeddingGenerator",
    "BGEEmbedder",
    "ChunkingError",
    "ChunkingCancelledError",
    "InvalidConfigurationError",
    "InvalidInputError",
]
