"""Request-scoped values passed between preprocessing stages."""

from .embedding import EmbeddingRequest, EmbeddingVector
from .query import PreparedQuery

__all__ = ["EmbeddingRequest", "EmbeddingVector", "PreparedQuery"]
