"""Mock language-model client for testing (no external API)."""

import hashlib
import random
import re
from typing import Any

from loguru import logger

from ragprep.errors import InvalidParameterError
from ragprep.llm.base import BaseLLM

FILLER_WORDS = frozenset({
    "a", "an", "the", "please", "just", "like", "really", "gonna", "wanna",
    "can", "could", "you", "tell", "me", "what's", "whats", "is", "be",
    "i", "want", "to", "know", "about", "some", "kind", "of",
})


class MockLLM(BaseLLM):
    """Deterministic language-model client for tests and offline runs.

    WARNING: This client is NOT suitable for production use.

    Chat replies are either a fixed ``response`` or the user message with
    filler words dropped. Embeddings are hash-seeded unit vectors, so the
    same text always maps to the same vector. Setting ``error`` makes every
    call raise it. Call counters let tests assert batching behaviour.

    Attributes:
        response: Fixed chat reply (None = derive from the user message)
        error: Exception raised by every call, if set
        supported_dimensions: Accepted vector lengths (None = any positive)
        seed: Seed mixed into every embedding
    """

    def __init__(
        self,
        response: str | None = None,
        error: Exception | None = None,
        supported_dimensions: set[int] | None = None,
        seed: int = 42,
    ):
        self.response = response
        self.error = error
        self.supported_dimensions = supported_dimensions
        self.seed = seed
        self.chat_calls: list[dict[str, Any]] = []
        self.embed_calls: list[dict[str, Any]] = []
        logger.warning(
            "Using MockLLM - NOT for production use! "
            "Replace with a real client for actual applications."
        )

    async def chat_async(
        self,
        messages: list[dict[str, str]],
        model: str | None = None,
        **kwargs: Any
    ) -> str | None:
        self.chat_calls.append({"messages": messages, "model": model, **kwargs})
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response

        user_text = next(
            (m["content"] for m in reversed(messages) if m.get("role") == "user"), ""
        )
        words = re.findall(r"[\w'\[\]-]+", user_text)
        kept = [w for w in words if w.lower() not in FILLER_WORDS]
        return " ".join(kept or words)

    async def embed_async(
        self,
        texts: list[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> list[list[float]]:
        self.embed_calls.append({"texts": list(texts), "model": model, "dimensions": dimensions})
        if self.error is not None:
            raise self.error

        if dimensions is None:
            dimensions = 1024
        if not texts:
            raise InvalidParameterError("input cannot be empty")
        if dimensions <= 0 or (
            self.supported_dimensions is not None and dimensions not in self.supported_dimensions
        ):
            raise InvalidParameterError(
                f"Unsupported dimensions: {dimensions}",
                details={"model": model, "dimensions": dimensions},
            )

        logger.debug(f"Generating {len(texts)} mock embeddings (dim={dimensions})")
        return [self._vector(text, dimensions) for text in texts]

    def _vector(self, text: str, dimensions: int) -> list[float]:
        digest = hashlib.sha256(f"{self.seed}:{text}".encode("utf-8")).digest()
        rng = random.Random(int.from_bytes(digest[:8], "big"))

        vec = [rng.gauss(0, 1) for _ in range(dimensions)]

        # Normalize to unit length
        magnitude = sum(x**2 for x in vec) ** 0.5
        if magnitude > 0:
            return [x / magnitude for x in vec]
        return [0.0] * dimensions
