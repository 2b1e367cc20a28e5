"""Embedding generator backed by a language-model client."""

from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from ragprep.defaults import DEFAULT_EMBEDDING_DIMENSIONS, DEFAULT_EMBEDDING_MODEL
from ragprep.entities.embedding import EmbeddingRequest, EmbeddingVector
from ragprep.errors import (
    InvalidParameterError,
    MalformedResponseError,
    RagPrepError,
    wrap_exception,
)
from ragprep.llm.base import BaseLLM

from .base import BaseEmbedder


class EmbeddingGenerator(BaseEmbedder):
    """Turns batches of text into fixed-length vectors.

    The whole batch goes out in a single client call. Callers are
    responsible for chunking text to fit the model's token limit; nothing
    is split or truncated here.

    Every failure propagates: a missing vector cannot be substituted
    without corrupting the downstream index, so there is no fallback.

    Attributes:
        llm: Injected language-model client
        model: Default embedding model
        default_dimensions: Default vector length

    Example:
        >>> generator = EmbeddingGenerator(llm, dimensions=1024)
        >>> vectors = await generator.embed(["cat", "dog"])
        >>> len(vectors), len(vectors[0])
        (2, 1024)
    """

    def __init__(
        self,
        llm: BaseLLM,
        model: str = DEFAULT_EMBEDDING_MODEL,
        dimensions: int = DEFAULT_EMBEDDING_DIMENSIONS,
    ):
        if dimensions <= 0:
            raise InvalidParameterError(
                "dimensions must be a positive integer", details={"dimensions": dimensions}
            )
        self.llm = llm
        self.model = model
        self.default_dimensions = dimensions

    @property
    def dimension(self) -> int:
        return self.default_dimensions

    def build_request(
        self,
        texts: Sequence[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> EmbeddingRequest:
        """Validate the call arguments into an EmbeddingRequest.

        Raises:
            InvalidParameterError: On an empty batch, a bare string, a
                non-string input or a non-positive dimension
        """
        if isinstance(texts, str):
            raise InvalidParameterError(
                "texts must be a sequence of strings, not a single string"
            )

        try:
            return EmbeddingRequest(
                inputs=list(texts),
                model=model or self.model,
                dimensions=self.default_dimensions if dimensions is None else dimensions,
            )
        except ValidationError as e:
            raise InvalidParameterError(
                "Invalid embedding request",
                details={"errors": [err["msg"] for err in e.errors()]},
                original_error=e,
            ) from e

    async def embed(
        self,
        texts: Sequence[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> list[EmbeddingVector]:
        request = self.build_request(texts, model, dimensions)

        logger.debug(
            f"Embedding {len(request.inputs)} texts "
            f"(model={request.model}, dim={request.dimensions})"
        )

        try:
            vectors = await self.llm.embed_async(
                request.inputs, model=request.model, dimensions=request.dimensions
            )
        except RagPrepError as e:
            logger.error(f"Embedding request failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Embedding request failed: {e}")
            raise wrap_exception(e, context="Embedding request") from e

        self._check_response(request, vectors)
        return vectors

    def _check_response(self, request: EmbeddingRequest, vectors: list[EmbeddingVector]) -> None:
        if not isinstance(vectors, (list, tuple)) or len(vectors) != len(request.inputs):
            raise MalformedResponseError(
                "Embedding count does not match input count",
                details={
                    "expected": len(request.inputs),
                    "received": len(vectors) if isinstance(vectors, (list, tuple)) else None,
                },
            )

        for i, vector in enumerate(vectors):
            if not _is_number_sequence(vector):
                raise MalformedResponseError(
                    "Embedding is not a sequence of numbers",
                    details={"index": i, "received": type(vector).__name__},
                )
            if len(vector) != request.dimensions:
                raise MalformedResponseError(
                    "Embedding has unexpected dimension",
                    details={"index": i, "expected": request.dimensions, "received": len(vector)},
                )


def _is_number_sequence(value) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in value)


async def generate_embeddings(
    texts: Sequence[str],
    llm: BaseLLM,
    model: str | None = None,
    dimensions: int | None = None
) -> list[EmbeddingVector]:
    """Embed a batch without holding a generator instance."""
    generator = EmbeddingGenerator(
        llm,
        model=model or DEFAULT_EMBEDDING_MODEL,
        dimensions=dimensions if dimensions is not None else DEFAULT_EMBEDDING_DIMENSIONS,
    )
    return await generator.embed(texts)
