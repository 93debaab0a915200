# -*- coding: utf-8 -*-
"""
Semantic chunking with embedding-distance breakpoints and size limits

Splits text into sentences, embeds each sentence together with its
neighbours, and measures the cosine distance between consecutive windows.
A threshold derived from those distances (one of four statistics, or an
inverted target chunk count) decides where chunks end. Chunk text is then
cut down to the character budget implied by the token limit, preferring line
boundaries, and every final part is embedded on its own.

Algorithm:
    1. Segment text into sentences (NLTK Punkt, line breaks always split)
    2. Build contextual windows of +/- buffer_size sentences
    3. Embed all windows concurrently, keep index order
    4. distances[i] = 1 - cos(window[i], window[i + 1])
    5. Threshold from strategy or target count; breakpoints = distances > threshold
    6. Group sentences up to each breakpoint, drop groups under min_chunk_chars
    7. Split oversized groups, embed each final part concurrently

References:
    thresholds.py for the strategy formulas and target-count inversion
    text_splitter.py for the size-constrained splitter

"""
# Standard library
import asyncio
import logging
from typing import Dict, List, Optional, Sequence, Set, Union

# Third-party
import numpy as np

# Foundation
from semantic_chunking.utils.dataclasses import BreakpointThresholdType, Chunk
from semantic_chunking.utils.embedder import EmbeddingGenerator
from semantic_chunking.utils.errors import (
    ChunkingCancelledError,
    InvalidConfigurationError,
    InvalidInputError,
)
from semantic_chunking.utils.id_generator import generate_chunk_id

# Config
from semantic_chunking.utils.config import CHUNKING_CONFIG

# Local
from semantic_chunking.processing.chunks.context_windows import build_contextual_sentences
from semantic_chunking.processing.chunks.distances import calculate_distances
from semantic_chunking.processing.chunks.sentence_segmenter import SentenceSegmenter
from semantic_chunking.processing.chunks.text_splitter import max_chunk_chars, split_chunk_text
from semantic_chunking.processing.chunks.thresholds import ThresholdCalculator, detect_breakpoints

logger = logging.getLogger(__name__)


# Default values from config
DEFAULT_BUFFER_SIZE = CHUNKING_CONFIG.get('buffer_size', 1)
DEFAULT_THRESHOLD_TYPE = CHUNKING_CONFIG.get('threshold_type', 'percentile')
DEFAULT_THRESHOLD_AMOUNT = CHUNKING_CONFIG.get('threshold_amount')
DEFAULT_MIN_CHUNK_CHARS = CHUNKING_CONFIG.get('min_chunk_chars', 0)
DEFAULT_MAX_OVERRUN_CHARS = CHUNKING_CONFIG.get('max_overrun_chars', 200)
DEFAULT_LANGUAGE = CHUNKING_CONFIG.get('language', 'english')


class SemanticChunker:
    """
    Embedding-driven semantic chunker.

    Configuration is fixed at construction; one instance can serve many
    concurrent create_chunks() calls.

    Parameters (defaults from CHUNKING_CONFIG):
        embedding_generator: Object with ``async generate(text) -> vector``
        token_limit: Token budget per chunk; max chars = int(token_limit * 4 * 0.9)
        buffer_size: Neighbour sentences on each side for context windows (default 1)
        threshold_type: percentile | standard_deviation | interquartile | gradient
        threshold_amount: Strategy parameter (default 95 / 3 / 1.5 / 95)
        target_chunk_count: Desired chunk count; overrides the strategy when set
        min_chunk_chars: Shorter sentence groups are dropped (default 0)
        max_overrun_chars: Newline search window when splitting (default 200, 0 = off)
        language: NLTK Punkt language (default english)
        max_concurrency: Cap on in-flight embedding calls (default unlimited)
        segmenter: Custom object with ``segment(text) -> List[str]``

    Example:
        chunker = SemanticChunker(BGEEmbedder(), token_limit=512)
        chunks = await chunker.create_chunks(document_text)
    """

    def __init__(
        self,
        embedding_generator: EmbeddingGenerator,
        token_limit: int,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        threshold_type: Union[BreakpointThresholdType, str] = DEFAULT_THRESHOLD_TYPE,
        threshold_amount: Optional[float] = DEFAULT_THRESHOLD_AMOUNT,
        target_chunk_count: Optional[int] = None,
        min_chunk_chars: int = DEFAULT_MIN_CHUNK_CHARS,
        max_overrun_chars: int = DEFAULT_MAX_OVERRUN_CHARS,
        language: str = DEFAULT_LANGUAGE,
        max_concurrency: Optional[int] = None,
        segmenter: Optional[SentenceSegmenter] = None
    ):
        if token_limit <= 0:
            raise InvalidConfigurationError(f"token_limit must be positive, got {token_limit}")
        if min_chunk_chars < 0:
            raise InvalidConfigurationError(f"min_chunk_chars must be >= 0, got {min_chunk_chars}")
        if max_concurrency is not None and max_concurrency <= 0:
            raise InvalidConfigurationError(f"max_concurrency must be positive, got {max_concurrency}")

        self.embedding_generator = embedding_generator
        self.token_limit = token_limit
        self.buffer_size = buffer_size
        self.min_chunk_chars = min_chunk_chars
        self.max_overrun_chars = max(0, max_overrun_chars)
        self.max_concurrency = max_concurrency
        self.max_chunk_chars = max_chunk_chars(token_limit)

        self.threshold_calculator = ThresholdCalculator(
            threshold_type=threshold_type,
            threshold_amount=threshold_amount,
            target_chunk_count=target_chunk_count,
        )
        self.segmenter = segmenter or SentenceSegmenter(language=language)

        logger.info(
            f"SemanticChunker initialized: token_limit={token_limit}, "
            f"max_chunk_chars={self.max_chunk_chars}, buffer_size={buffer_size}, "
            f"threshold={self.threshold_calculator}, min_chunk_chars={min_chunk_chars}, "
            f"max_overrun_chars={self.max_overrun_chars}"
        )

    # ------------------------------------------------------------------
    # Embedding fan-out
    # ------------------------------------------------------------------

    @staticmethod
    def _check_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ChunkingCancelledError("Chunking cancelled by caller")

    async def _generate(self, text: str, cancel_event: Optional[asyncio.Event]):
        """Await the generator, abandoning the call as soon as the cancel event fires."""
        if cancel_event is None:
            return await self.embedding_generator.generate(text)

        generate_task = asyncio.ensure_future(self.embedding_generator.generate(text))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({generate_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not generate_task.done():
                generate_task.cancel()

        if cancel_event.is_set():
            if generate_task.done() and not generate_task.cancelled():
                # Result is discarded; retrieve any exception so it is not reported as unhandled
                generate_task.exception()
            raise ChunkingCancelledError("Chunking cancelled during embedding call")
        return generate_task.result()

    async def _embed(
        self,
        text: str,
        cancel_event: Optional[asyncio.Event],
        semaphore: Optional[asyncio.Semaphore]
    ) -> np.ndarray:
        self._check_cancelled(cancel_event)

        if semaphore is None:
            vector = await self._generate(text, cancel_event)
        else:
            async with semaphore:
                self._check_cancelled(cancel_event)
                vector = await self._generate(text, cancel_event)

        if vector is None:
            raise InvalidInputError("Embedding generator returned no vector")
        return np.asarray(vector, dtype=np.float64).ravel()

    async def _embed_all(
        self,
        texts: Sequence[str],
        cancel_event: Optional[asyncio.Event],
        semaphore: Optional[asyncio.Semaphore]
    ) -> List[np.ndarray]:
        """Embed texts concurrently; results come back in input order."""
        tasks = [
            asyncio.ensure_future(self._embed(text, cancel_event, semaphore))
            for text in texts
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except asyncio.CancelledError as e:
            for task in tasks:
                task.cancel()
            # gather() may re-wrap a child's cancellation as a plain CancelledError
            if cancel_event is not None and cancel_event.is_set() and not isinstance(e, ChunkingCancelledError):
                raise ChunkingCancelledError("Chunking cancelled by caller") from e
            raise
        except BaseException:
            # gather() leaves siblings running when one fails
            for task in tasks:
                task.cancel()
            raise

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def assemble_chunk_texts(self, sentences: Sequence[str], breakpoints: Set[int]) -> List[str]:
        """
        Group sentences at breakpoints and split oversized groups.

        Args:
            sentences: Sentences in document order
            breakpoints: Indices after which a chunk ends (last index implied)

        Returns:
            Final chunk texts in document order
        """
        texts = []
        current: List[str] = []
        last_index = len(sentences) - 1

        for index, sentence in enumerate(sentences):
            current.append(sentence)

            if index not in breakpoints and index != last_index:
                continue

            chunk_text = ' '.join(current).strip()
            current = []

            if len(chunk_text) < self.min_chunk_chars:
                logger.debug(
                    f"Dropping chunk ending at sentence {index}: "
                    f"{len(chunk_text)} chars < min_chunk_chars={self.min_chunk_chars}"
                )
                continue

            texts.extend(split_chunk_text(chunk_text, self.max_chunk_chars, self.max_overrun_chars))

        return texts

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create_chunks(
        self,
        text: str,
        cancel_event: Optional[asyncio.Event] = None
    ) -> List[Chunk]:
        """
        Chunk ``text`` into semantically coherent, size-limited chunks.

        Args:
            text: Full input text
            cancel_event: Optional event; once set, in-flight embedding calls
                are abandoned and the whole operation aborts

        Returns:
            Chunks in document order, each with its own embedding

        Raises:
            ChunkingCancelledError: If ``cancel_event`` fires
            InvalidInputError: If the generator returns unusable vectors
            Exception: Anything raised by the embedding generator, unchanged
        """
        self._check_cancelled(cancel_event)
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        sentences = self.segmenter.segment(text)

        if len(sentences) <= 1:
            embedding = await self._embed(text, cancel_event, semaphore)
            self._check_cancelled(cancel_event)
            return [Chunk(id=generate_chunk_id(), text=text, embedding=embedding)]

        contextual_sentences = build_contextual_sentences(sentences, self.buffer_size)

        try:
            contextual_embeddings = await self._embed_all(contextual_sentences, cancel_event, semaphore)
        except Exception as e:
            logger.error(f"Embedding {len(contextual_sentences)} contextual sentences failed: {e}")
            raise

        distances = calculate_distances(contextual_embeddings)
        threshold = self.threshold_calculator.calculate(distances)
        breakpoints = detect_breakpoints(distances, threshold)

        logger.debug(
            f"{len(sentences)} sentences, threshold={threshold:.4f}, "
            f"{len(breakpoints)} breakpoints: {sorted(breakpoints)}"
        )

        chunk_texts = self.assemble_chunk_texts(sentences, breakpoints)

        try:
            chunk_embeddings = await self._embed_all(chunk_texts, cancel_event, semaphore)
        except Exception as e:
            logger.error(f"Embedding {len(chunk_texts)} chunks failed: {e}")
            raise

        chunks = [
            Chunk(id=generate_chunk_id(), text=chunk_text, embedding=embedding)
            for chunk_text, embedding in zip(chunk_texts, chunk_embeddings)
        ]

        self._check_cancelled(cancel_event)

        logger.info(f"Chunked {len(text)} chars / {len(sentences)} sentences into {len(chunks)} chunks")
        return chunks

    def create_chunks_sync(self, text: str) -> List[Chunk]:
        """Blocking wrapper around create_chunks() for code without an event loop."""
        return asyncio.run(self.create_chunks(text))

    def get_statistics(self, chunks: List[Chunk]) -> Dict:
        """
        Summarise chunk sizes.

        Args:
            chunks: Output of create_chunks()

        Returns:
            Dict with chunk count and character-length statistics
        """
        if not chunks:
            return {}

        lengths = [len(c.text) for c in chunks]

        return {
            'total_chunks': len(chunks),
            'chars': {
                'mean': float(np.mean(lengths)),
                'median': float(np.median(lengths)),
                'std': float(np.std(lengths)),
                'min': int(min(lengths)),
                'max': int(max(lengths)),
            },
            'max_chunk_chars': self.max_chunk_chars,
            'oversized_chunks': sum(1 for n in lengths if n > self.max_chunk_chars),
        }
