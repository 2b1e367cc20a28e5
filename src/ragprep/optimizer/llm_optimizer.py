from loguru import logger

from ragprep.defaults import DEFAULT_OPTIMIZER_MODEL
from ragprep.llm.base import BaseLLM

from .base import BaseQueryOptimizer

OPTIMIZE_SYSTEM_PROMPT = """You are an AI assistant tasked with optimizing queries for a RAG (Retrieval-Augmented Generation) system. Your goal is to refine the original query to improve the retrieval of relevant information from the knowledge base.

Follow these guidelines to optimize the query:
1. Remove unnecessary words or phrases that don't contribute to the core meaning.
2. Identify and emphasize key concepts or entities.
3. Use more specific or technical terms if appropriate.
4. Ensure the query is clear and concise.
5. Maintain the original intent of the query.

Output only the refined query text, without any additional explanation or formatting, on a single line:"""


class LLMQueryOptimizer(BaseQueryOptimizer):
    """
    Optimizer that asks a chat model to rewrite the query.

    Sends one system instruction and one user message per call. Results
    are not deterministic across calls.
    """

    def __init__(
        self,
        llm: BaseLLM,
        model: str = DEFAULT_OPTIMIZER_MODEL,
        system_prompt: str = OPTIMIZE_SYSTEM_PROMPT,
    ):
        self.llm = llm
        self.model = model
        self.system_prompt = system_prompt

    def build_messages(self, query: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": query},
        ]

    async def optimize(self, query: str) -> str:
        if not query or not query.strip():
            return query

        try:
            response = await self.llm.chat_async(self.build_messages(query), model=self.model)
        except Exception as e:
            logger.warning(f"Query optimization failed, using original query: {e}")
            return query

        if response is not None and not isinstance(response, str):
            logger.warning(
                f"Query optimization returned {type(response).__name__}, using original query"
            )
            return query

        rewritten = (response or "").strip()
        if not rewritten:
            logger.debug("Optimizer returned an empty response, using original query")
            return query

        logger.debug(f"Optimized query: '{query}' -> '{rewritten}'")
        return rewritten


async def optimize_query(query: str, llm: BaseLLM, model: str | None = None) -> str:
    """Optimize a single query without holding an optimizer instance."""
    optimizer = LLMQueryOptimizer(llm, model=model or DEFAULT_OPTIMIZER_MODEL)
    return await optimizer.optimize(query)
