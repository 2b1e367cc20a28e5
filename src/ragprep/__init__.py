"""
ragprep - Query preprocessing for Retrieval-Augmented Generation.

This package rewrites user queries for retrieval and turns text into
embedding vectors, using an injected language-model client.
"""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .embedder import BaseEmbedder, EmbeddingGenerator, generate_embeddings
from .entities import EmbeddingRequest, EmbeddingVector, PreparedQuery
from .errors import (
    InvalidParameterError,
    InvalidResponseError,
    MalformedResponseError,
    ModelTimeoutError,
    ModelUnavailableError,
    RagPrepError,
    is_retryable,
)
from .llm import BaseLLM, LLMConfig, LLMFactory, MockLLM, OpenAILLM, TimeoutConfig
from .optimizer import BaseQueryOptimizer, LLMQueryOptimizer, optimize_query
from .pipeline import QueryPreprocessor

__all__ = [
    # Version
    "__version__",
    # Config
    "Settings",
    "load_settings",
    # Entities
    "EmbeddingRequest",
    "EmbeddingVector",
    "PreparedQuery",
    # Errors
    "RagPrepError",
    "ModelUnavailableError",
    "ModelTimeoutError",
    "InvalidParameterError",
    "InvalidResponseError",
    "MalformedResponseError",
    "is_retryable",
    # LLM clients
    "BaseLLM",
    "LLMConfig",
    "TimeoutConfig",
    "LLMFactory",
    "MockLLM",
    "OpenAILLM",
    # Optimizer
    "BaseQueryOptimizer",
    "LLMQueryOptimizer",
    "optimize_query",
    # Embedder
    "BaseEmbedder",
    "EmbeddingGenerator",
    "generate_embeddings",
    # Pipeline
    "QueryPreprocessor",
]
