"""
Query preprocessing pipeline.

Runs the stages that turn a raw user query into something a similarity
search can consume:

    raw query -> optimizer (optional) -> embedder -> PreparedQuery

Optimizer failures are invisible to the caller: the original text is
embedded instead. Embedding failures propagate so that the enclosing
retrieval request fails visibly.
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from ragprep.embedder.base import BaseEmbedder
from ragprep.entities.query import PreparedQuery
from ragprep.errors import InvalidParameterError
from ragprep.optimizer.base import BaseQueryOptimizer


class QueryPreprocessor:
    """Optimize-then-embed composition for retrieval queries.

    Attributes:
        optimizer: Query optimizer (None disables optimization entirely)
        embedder: Embedder producing the search vectors
    """

    def __init__(self, embedder: BaseEmbedder, optimizer: BaseQueryOptimizer | None = None):
        self.embedder = embedder
        self.optimizer = optimizer

    async def _rewrite(self, query: str, optimize: bool) -> str:
        if not optimize or self.optimizer is None:
            return query
        return await self.optimizer.optimize(query)

    async def prepare(self, query: str, optimize: bool = True) -> PreparedQuery:
        """Prepare a single query.

        Args:
            query: Raw user query
            optimize: Whether to run the optimizer first

        Returns:
            PreparedQuery holding the embedded text and its vector
        """
        results = await self.prepare_batch([query], optimize=optimize)
        return results[0]

    async def prepare_batch(self, queries: Sequence[str], optimize: bool = True) -> list[PreparedQuery]:
        """Prepare several queries with a single embedding call.

        Queries are optimized independently and concurrently; the resulting
        texts are then embedded together. Output order matches input order.
        """
        if isinstance(queries, str):
            raise InvalidParameterError("queries must be a sequence of strings, not a single string")
        if not queries:
            raise InvalidParameterError("queries cannot be empty")

        texts = await asyncio.gather(*(self._rewrite(q, optimize) for q in queries))

        rewritten = sum(1 for q, t in zip(queries, texts) if q != t)
        logger.debug(f"Preparing {len(queries)} queries ({rewritten} rewritten)")

        vectors = await self.embedder.embed(list(texts))

        return [
            PreparedQuery(original=q, text=t, vector=v)
            for q, t, v in zip(queries, texts, vectors)
        ]
