# -*- coding: utf-8 -*-
"""
Size-constrained splitting of chunk text.

Character budget derived from a token limit with a 4 chars/token heuristic
and 10% headroom. Oversized text is cut at the first newline found just past
the budget (within ``overrun_chars``), falling back to a hard cut.
"""
from typing import Iterator

from semantic_chunking.utils.config import CHARS_PER_TOKEN, SAFETY_MARGIN
from semantic_chunking.utils.errors import InvalidInputError


def max_chunk_chars(token_limit: int) -> int:
    """
    Character budget for one chunk.

    Example:
        >>> max_chunk_chars(10)
        36
    """
    return int(token_limit * CHARS_PER_TOKEN * SAFETY_MARGIN)


def split_chunk_text(text: str, max_chars: int, overrun_chars: int) -> Iterator[str]:
    """
    Yield parts of ``text`` no longer than ``max_chars`` where possible.

    A part may run past ``max_chars`` by up to ``overrun_chars`` to end on a
    line boundary; the newline itself (and any directly following ones) is
    dropped from the start of the next part. Without a newline in that
    window the text is hard-cut at ``max_chars``, so concatenating the parts
    gives back the input minus those cut-point newlines.

    Args:
        text: Chunk text to split
        max_chars: Size budget per part
        overrun_chars: Newline search window; 0 disables the search

    Yields:
        Parts in order; nothing for empty text

    Raises:
        InvalidInputError: If ``max_chars`` is not positive
    """
    if max_chars <= 0:
        raise InvalidInputError(f"max_chars must be positive, got {max_chars}")

    remaining = text
    while len(remaining) > max_chars:
        cut = max_chars

        if overrun_chars > 0:
            search_end = min(len(remaining), max_chars + overrun_chars)
            newline = remaining.find('\n', max_chars, search_end)
            if newline >= 0:
                cut = newline

        yield remaining[:cut]
        remaining = remaining[cut:].lstrip('\n')

    if remaining:
        yield remaining
