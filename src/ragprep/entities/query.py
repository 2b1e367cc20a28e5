"""Prepared query entity."""

from pydantic import BaseModel


class PreparedQuery(BaseModel):
    """A query ready for similarity search.

    Attributes:
        original: The query as the user typed it
        text: The text that was embedded (optimized or original)
        vector: Embedding of ``text``
    """

    original: str
    text: str
    vector: list[float]

    model_config = {
        "frozen": True,
    }

    @property
    def optimized(self) -> bool:
        """Whether the optimizer changed the query."""
        return self.text != self.original
