"""
Shared test doubles for the chunker test suite.

HashEmbeddingGenerator gives deterministic pseudo-random vectors per text so
tests never need a model download. RegexSegmenter stands in for the NLTK
segmenter where a test is about the chunking algorithm, not tokenisation.
"""
import asyncio
import hashlib
import re
from typing import Dict, List, Sequence

import numpy as np
import pytest


class HashEmbeddingGenerator:
    """Deterministic random vectors seeded from the SHA-256 of the text."""

    def __init__(self, dim: int = 384, delay: bool = False):
        self.dim = dim
        self.delay = delay
        self.calls: List[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    def vector_for(self, text: str) -> np.ndarray:
        seed = int(hashlib.sha256(text.encode('utf-8')).hexdigest()[:8], 16)
        return np.random.default_rng(seed).random(self.dim)

    async def generate(self, text: str) -> np.ndarray:
        self.calls.append(text)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.delay:
                # Later texts tend to finish first
                await asyncio.sleep((len(self.calls) % 5) * 0.001)
            else:
                await asyncio.sleep(0)
            return self.vector_for(text)
        finally:
            self.in_flight -= 1


class TopicEmbeddingGenerator:
    """Vector chosen by the first keyword found in the text."""

    def __init__(self, topics: Dict[str, Sequence[float]], default: Sequence[float]):
        self.topics = topics
        self.default = default
        self.calls: List[str] = []

    async def generate(self, text: str) -> Sequence[float]:
        self.calls.append(text)
        for keyword, vector in self.topics.items():
            if keyword in text:
                return vector
        return self.default


class RegexSegmenter:
    """Splits after . ! ? and on line breaks."""

    def segment(self, text: str) -> List[str]:
        parts = re.split(r'(?<=[.!?])\s+|\n', text)
        return [p.strip() for p in parts if p.strip()]


@pytest.fixture
def embedder():
    return HashEmbeddingGenerator()


@pytest.fixture
def segmenter():
    return RegexSegmenter()
