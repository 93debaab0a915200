# -*- coding: utf-8 -*-
"""
Contextual sentence windows used for boundary embeddings.

Embedding a sentence together with its neighbours smooths out noise from
very short sentences. The windows are only ever embedded, never emitted as
chunk text.
"""
from typing import List, Sequence


def build_contextual_sentences(sentences: Sequence[str], buffer_size: int) -> List[str]:
    """
    Pad every sentence with up to ``buffer_size`` neighbours on each side.

    Windows are clamped to the list bounds, so the centre sentence appears
    exactly once and nothing is duplicated. A negative buffer behaves like 0.

    Args:
        sentences: Sentences in document order
        buffer_size: Half-width of the window

    Returns:
        One space-joined window per sentence, same order

    Example:
        >>> build_contextual_sentences(["A", "B", "C", "D"], 1)
        ['A B', 'A B C', 'B C D', 'C D']
    """
    buffer = max(0, buffer_size)
    n = len(sentences)

    windows = []
    for i in range(n):
        start = max(0, i - buffer)
        end = min(n, i + buffer + 1)
        windows.append(' '.join(sentences[start:end]))

    return windows
