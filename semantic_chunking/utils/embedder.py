"""
Embedding generation for the semantic chunker.

The chunker only depends on the EmbeddingGenerator protocol: one awaitable
call per text, safe to issue concurrently. BGEEmbedder is the stock
implementation backed by sentence-transformers; any object with a matching
``generate`` coroutine (remote API client, cache wrapper, test double) can be
passed instead.
"""

import asyncio
import logging
from typing import List, Optional, Protocol, Sequence, runtime_checkable

import numpy as np
from sentence_transformers import SentenceTransformer

from semantic_chunking.utils.config import EMBEDDING_CONFIG

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingGenerator(Protocol):
    """Anything that can turn one text into one fixed-length vector."""

    async def generate(self, text: str) -> Sequence[float]:
        ...


class BGEEmbedder:
    """
    sentence-transformers embedder (BGE family by default).

    ``encode`` is blocking, so ``generate`` hands it to a worker thread via
    asyncio.to_thread; the event loop stays free while the chunker fans out
    one request per contextual sentence.

    Example:
        embedder = BGEEmbedder(device='cpu')
        vector = await embedder.generate("AI systems should be transparent.")
        matrix = embedder.embed_batch(["First text.", "Second text."])
    """

    def __init__(
        self,
        model_name: str = EMBEDDING_CONFIG['model_name'],
        device: Optional[str] = EMBEDDING_CONFIG['device'],
        normalize: bool = EMBEDDING_CONFIG['normalize'],
    ):
        """
        Load the model.

        Args:
            model_name: HuggingFace model identifier
            device: 'cpu', 'cuda', or None for auto-detect
            normalize: L2-normalise vectors (cosine becomes a dot product)
        """
        logger.info(f"Loading embedding model: {model_name}")

        self.model_name = model_name
        self.normalize = normalize
        self.model = SentenceTransformer(model_name, device=device)
        self.embedding_dim = self.model.get_sentence_embedding_dimension()

        logger.info(f"Model loaded on device: {self.model.device}, dimension: {self.embedding_dim}")

    def embed_single(self, text: str) -> np.ndarray:
        """Embed one text synchronously."""
        return self.model.encode(
            text,
            convert_to_numpy=True,
            normalize_embeddings=self.normalize,
            show_progress_bar=False,
        )

    def embed_batch(self, texts: List[str], batch_size: int = 32) -> np.ndarray:
        """
        Embed many texts in batches.

        Returns:
            Array of shape (len(texts), embedding_dim)
        """
        logger.debug(f"Embedding {len(texts)} texts with batch_size={batch_size}")
        return self.model.encode(
            texts,
            batch_size=batch_size,
            convert_to_numpy=True,
            normalize_embeddings=self.normalize,
            show_progress_bar=False,
        )

    async def generate(self, text: str) -> np.ndarray:
        return await asyncio.to_thread(self.embed_single, text)
