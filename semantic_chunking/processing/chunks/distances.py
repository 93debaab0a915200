# -*- coding: utf-8 -*-
"""
Semantic distance between neighbouring contextual sentences.

distance = 1 - cosine_similarity, with the similarity clamped to [-1, 1] so
every distance lies in [0, 2].
"""
# Standard library
from typing import List, Optional, Sequence

# Third-party
import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sk_cosine_similarity

# Foundation
from semantic_chunking.utils.errors import InvalidInputError


def _as_vector(vector: Optional[Sequence[float]], name: str) -> np.ndarray:
    if vector is None:
        raise InvalidInputError(f"Embedding vector {name} is missing")
    return np.asarray(vector, dtype=np.float64).ravel()


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two equal-length vectors.

    Returns 0.0 if either vector has zero magnitude. sklearn normalises rows
    and leaves all-zero rows at zero, which yields exactly that.

    Raises:
        InvalidInputError: If a vector is None or the lengths differ
    """
    vec_a = _as_vector(a, 'a')
    vec_b = _as_vector(b, 'b')

    if vec_a.shape != vec_b.shape:
        raise InvalidInputError(
            f"Vectors must have equal length (got {vec_a.size} and {vec_b.size})"
        )
    if vec_a.size == 0:
        return 0.0

    similarity = sk_cosine_similarity(vec_a.reshape(1, -1), vec_b.reshape(1, -1))[0][0]
    return float(np.clip(similarity, -1.0, 1.0))


def calculate_distances(embeddings: Sequence[Sequence[float]]) -> List[float]:
    """
    Distance for every adjacent pair of embeddings.

    Returns:
        ``len(embeddings) - 1`` distances; distances[i] compares i and i + 1
    """
    return [
        1.0 - cosine_similarity(embeddings[i], embeddings[i + 1])
        for i in range(len(embeddings) - 1)
    ]
