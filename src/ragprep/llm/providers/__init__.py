"""
Language-model client implementations.

- OpenAILLM: OpenAI-compatible API client
- MockLLM: deterministic offline client for tests

Applications can also inject their own BaseLLM subclass.
"""

from .mock import MockLLM
from .openai import OpenAILLM

__all__ = ["MockLLM", "OpenAILLM"]
