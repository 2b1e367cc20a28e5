"""Query optimization for retrieval.

Rewrites a user's query into a retrieval-friendly form. Optimization is
best-effort: any failure yields the original query.
"""

from .base import BaseQueryOptimizer
from .llm_optimizer import OPTIMIZE_SYSTEM_PROMPT, LLMQueryOptimizer, optimize_query

__all__ = [
    "BaseQueryOptimizer",
    "LLMQueryOptimizer",
    "OPTIMIZE_SYSTEM_PROMPT",
    "optimize_query",
]
