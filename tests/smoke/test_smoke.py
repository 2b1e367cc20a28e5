import math

import pytest

import ragprep
from ragprep import EmbeddingGenerator, LLMFactory, LLMQueryOptimizer, QueryPreprocessor


@pytest.mark.smoke
class TestCoreSmoke:
    def test_public_api(self):
        """Verify the package exposes every stage."""
        for name in ragprep.__all__:
            assert hasattr(ragprep, name), name

    @pytest.mark.asyncio
    async def test_basic_flow_smoke(self):
        """Smoke test for the critical path with the offline client."""
        llm = LLMFactory.create("mock")
        preprocessor = QueryPreprocessor(
            embedder=EmbeddingGenerator(llm),
            optimizer=LLMQueryOptimizer(llm),
        )

        prepared = await preprocessor.prepare("what's the weather gonna be like tomorrow in the city")

        assert prepared.text
        assert len(prepared.vector) == 1024
        assert all(math.isfinite(x) for x in prepared.vector)
