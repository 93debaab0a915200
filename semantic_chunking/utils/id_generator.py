# -*- coding: utf-8 -*-
"""
ID generation for chunks.

Chunk IDs only need to be unique, not reproducible: the same sentence group
chunked twice is two different chunks. UUID4 gives that without any shared
counter between concurrent calls.

Example:
    from semantic_chunking.utils.id_generator import generate_chunk_id

    chunk_id = generate_chunk_id()
    # Returns: "3b2f0c4e-8a1d-4e57-9c0e-1f6d2a7b9e44"
"""

import uuid


def generate_chunk_id() -> str:
    """Return a fresh random chunk identifier (UUID4, canonical string form)."""
    return str(uuid.uuid4())
