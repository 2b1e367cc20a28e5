"""Pytest configuration and global fixtures for ragprep tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from ragprep.llm.base import BaseLLM
from ragprep.llm.providers.mock import MockLLM


@pytest.fixture
def mock_llm():
    """Healthy deterministic client."""
    return MockLLM()


@pytest.fixture
def fake_llm():
    """BaseLLM stand-in whose coroutines are AsyncMocks."""
    llm = MagicMock(spec=BaseLLM)
    llm.chat_async = AsyncMock(return_value="rewritten query")
    llm.embed_async = AsyncMock(side_effect=lambda texts, model=None, dimensions=None: [
        [float(i)] * dimensions for i, _ in enumerate(texts)
    ])
    return llm


@pytest.fixture
def sample_texts() -> list[str]:
    return [
        "Retrieval-Augmented Generation combines search with generation.",
        "Vector databases enable semantic search.",
        "Embeddings map text to points in a vector space.",
    ]


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "smoke: Smoke tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
