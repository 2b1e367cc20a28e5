"""Embedding generation.

This module converts batches of text into fixed-length vectors through an
injected language-model client. Failures always propagate.
"""

from .base import BaseEmbedder
from .generator import EmbeddingGenerator, generate_embeddings

__all__ = ["BaseEmbedder", "EmbeddingGenerator", "generate_embeddings"]
