from abc import ABC, abstractmethod


class BaseQueryOptimizer(ABC):
    """Abstract base class for query optimization.

    Implementations must never raise on model failure and must never return
    an empty string for a non-empty query.
    """

    @abstractmethod
    async def optimize(self, query: str) -> str:
        """
        Rewrite the query for retrieval.

        Args:
            query: Original query string

        Returns:
            Optimized query, or the original query if optimization failed
        """
        pass
