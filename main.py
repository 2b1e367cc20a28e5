#!/usr/bin/env python3
"""
ragprep Demo Application

Optimizes a query and embeds it. Uses the OpenAI client when
OPENAI_API_KEY is set, otherwise the offline mock client.

    python main.py "what's the weather gonna be like tomorrow in the city"
"""

import asyncio
import sys

from loguru import logger

from ragprep import (
    EmbeddingGenerator,
    LLMFactory,
    LLMQueryOptimizer,
    QueryPreprocessor,
    RagPrepError,
)
from ragprep.config.settings import settings

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)


async def run(query: str) -> int:
    llm_type = settings.LLM_TYPE if settings.OPENAI_API_KEY else "mock"
    if llm_type == "mock":
        logger.info("OPENAI_API_KEY not set, using mock client")
        llm = LLMFactory.create("mock")
    else:
        llm = LLMFactory.from_settings(settings)

    preprocessor = QueryPreprocessor(
        embedder=EmbeddingGenerator(
            llm, model=settings.EMBEDDING_MODEL, dimensions=settings.EMBEDDING_DIMENSIONS
        ),
        optimizer=LLMQueryOptimizer(llm, model=settings.OPTIMIZER_MODEL),
    )

    try:
        prepared = await preprocessor.prepare(query)
    except RagPrepError as e:
        logger.error(f"Query preprocessing failed: {e}")
        return 1

    print(f"Original:  {prepared.original}")
    print(f"Optimized: {prepared.text}")
    print(f"Vector:    {len(prepared.vector)} dims, first={prepared.vector[:4]}")
    return 0


def main():
    query = " ".join(sys.argv[1:]) or "what's the weather gonna be like tomorrow in the city"
    sys.exit(asyncio.run(run(query)))


if __name__ == "__main__":
    main()
