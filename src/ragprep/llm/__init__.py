"""Language-model client module.

This module provides the client capability interface, concrete
implementations and a factory for creating clients.
"""

from .base import BaseLLM
from .config import LLMConfig, TimeoutConfig
from .factory import LLMFactory
from .providers import MockLLM, OpenAILLM

__all__ = [
    "BaseLLM",
    "LLMConfig",
    "TimeoutConfig",
    "LLMFactory",
    "MockLLM",
    "OpenAILLM",
]
