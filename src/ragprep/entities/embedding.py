"""Embedding request entity."""

from pydantic import BaseModel, Field

EmbeddingVector = list[float]


class EmbeddingRequest(BaseModel):
    """A batch of texts to embed in a single call.

    Attributes:
        inputs: Ordered input strings; output[i] corresponds to inputs[i]
        model: Embedding model identifier
        dimensions: Length of every returned vector
    """

    inputs: list[str] = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    dimensions: int = Field(..., gt=0)

    model_config = {
        "frozen": True,
        "strict": True,
    }
