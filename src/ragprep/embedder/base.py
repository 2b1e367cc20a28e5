"""Base embedder interface."""

from abc import ABC, abstractmethod


class BaseEmbedder(ABC):
    """Abstract base class for embedding generation.

    Embedders convert text strings into vector representations.
    """

    @abstractmethod
    async def embed(
        self,
        texts: list[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> list[list[float]]:
        """Generate embeddings for a list of texts.

        Args:
            texts: List of text strings to embed
            model: Embedding model (None = embedder default)
            dimensions: Vector length (None = embedder default)

        Returns:
            List of embedding vectors (same order as input)

        Raises:
            InvalidParameterError: If texts is empty or dimensions is invalid
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Return the default embedding dimension.

        Returns:
            Size of embedding vectors produced when no override is given
        """
        pass
