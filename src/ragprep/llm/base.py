"""Base language-model client interface."""

from abc import ABC, abstractmethod
from typing import Any


class BaseLLM(ABC):
    """Abstract base class for language-model clients.

    A client exposes two capabilities: generating text from role-tagged
    messages, and turning a batch of texts into embedding vectors. The
    preprocessing components receive a client by injection and never
    construct one themselves.
    """

    @abstractmethod
    async def chat_async(
        self,
        messages: list[dict[str, str]],
        model: str | None = None,
        **kwargs: Any
    ) -> str | None:
        """Generate a completion for the given messages.

        Args:
            messages: Ordered role-tagged messages, e.g.
                [{"role": "system", "content": "..."}, {"role": "user", "content": "..."}]
            model: Model identifier (None = client default)
            **kwargs: Model-specific generation parameters

        Returns:
            Generated text, or None when the model produced no content

        Raises:
            RagPrepError: On transport, auth, quota or response failures
        """
        pass

    @abstractmethod
    async def embed_async(
        self,
        texts: list[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> list[list[float]]:
        """Generate embeddings for a batch of texts in one request.

        Args:
            texts: Input strings
            model: Embedding model identifier (None = client default)
            dimensions: Requested vector length (None = model default)

        Returns:
            One vector per input, in input order

        Raises:
            RagPrepError: On transport, auth, quota or parameter failures
        """
        pass
