# -*- coding: utf-8 -*-
"""
Sentence segmentation on top of NLTK Punkt.

Hard line breaks always end a sentence (they act as paragraph separators);
Punkt then splits each line on sentence punctuation while handling
abbreviations, decimals and the like for the configured language. Output is
trimmed, non-empty and in document order.
"""
# Standard library
import logging
from typing import List

# Third-party
import nltk

# Config
from semantic_chunking.utils.config import CHUNKING_CONFIG

logger = logging.getLogger(__name__)

_punkt_checked = False


def ensure_punkt() -> None:
    """Download the Punkt tables once per process if they are missing."""
    global _punkt_checked
    if _punkt_checked:
        return
    try:
        nltk.data.find('tokenizers/punkt_tab')
    except LookupError:
        logger.info("NLTK punkt_tab not found, downloading")
        nltk.download('punkt_tab', quiet=True)
    _punkt_checked = True


class SentenceSegmenter:
    """
    Splits raw text into sentences.

    Example:
        >>> SentenceSegmenter().segment("Dr. Smith arrived. He sat down.\\nNew line")
        ['Dr. Smith arrived.', 'He sat down.', 'New line']
    """

    def __init__(self, language: str = CHUNKING_CONFIG['language']):
        self.language = language
        ensure_punkt()

    def segment(self, text: str) -> List[str]:
        sentences = []
        for line in text.splitlines():
            if not line.strip():
                continue
            for sentence in nltk.sent_tokenize(line, language=self.language):
                sentence = sentence.strip()
                if sentence:
                    sentences.append(sentence)
        return sentences
