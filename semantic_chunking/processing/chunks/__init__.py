# -*- coding: utf-8 -*-
"""
Chunking subpackage.

Contains sentence_segmenter (NLTK adapter), context_windows, distances,
thresholds (strategies, target-count inversion, breakpoints), text_splitter
(size limits) and semantic_chunker (orchestrator).
"""
