"""
Tests for EmbeddingGenerator.

Embedding is a required transformation: every failure propagates as a
typed error, one request goes out per batch, and output is index-aligned
with input.
"""

import math
from unittest.mock import AsyncMock

import pytest

from ragprep.embedder import EmbeddingGenerator, generate_embeddings
from ragprep.errors import (
    AuthenticationError,
    InvalidParameterError,
    MalformedResponseError,
    ModelTimeoutError,
    ModelUnavailableError,
    PermanentError,
)
from ragprep.llm.providers.mock import MockLLM


class TestEmbedShape:

    @pytest.mark.asyncio
    async def test_cat_dog_1024(self, mock_llm):
        vectors = await EmbeddingGenerator(mock_llm).embed(["cat", "dog"], dimensions=1024)

        assert len(vectors) == 2
        for vec in vectors:
            assert len(vec) == 1024
            assert all(math.isfinite(x) for x in vec)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [1, 3, 17])
    async def test_one_vector_per_input(self, mock_llm, size):
        texts = [f"text {i}" for i in range(size)]
        vectors = await EmbeddingGenerator(mock_llm, dimensions=32).embed(texts)

        assert len(vectors) == size
        assert all(len(v) == 32 for v in vectors)

    @pytest.mark.asyncio
    async def test_defaults(self, mock_llm):
        generator = EmbeddingGenerator(mock_llm)
        await generator.embed(["cat"])

        call = mock_llm.embed_calls[0]
        assert call["model"] == "text-embedding-3-large"
        assert call["dimensions"] == 1024
        assert generator.dimension == 1024

    @pytest.mark.asyncio
    async def test_per_call_overrides(self, mock_llm):
        generator = EmbeddingGenerator(mock_llm, model="small", dimensions=256)
        await generator.embed(["cat"], model="large", dimensions=512)

        call = mock_llm.embed_calls[0]
        assert call["model"] == "large"
        assert call["dimensions"] == 512
        assert generator.dimension == 256


class TestBatching:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [1, 2, 50])
    async def test_single_call_per_batch(self, fake_llm, size):
        await EmbeddingGenerator(fake_llm, dimensions=8).embed([f"t{i}" for i in range(size)])

        fake_llm.embed_async.assert_awaited_once()
        assert len(fake_llm.embed_async.call_args.args[0]) == size

    @pytest.mark.asyncio
    async def test_order_preserved_under_permutation(self, mock_llm, sample_texts):
        generator = EmbeddingGenerator(mock_llm, dimensions=16)
        forward = await generator.embed(sample_texts)
        permuted = await generator.embed(list(reversed(sample_texts)))

        assert permuted == list(reversed(forward))

    @pytest.mark.asyncio
    async def test_accepts_tuple(self, mock_llm):
        vectors = await EmbeddingGenerator(mock_llm, dimensions=4).embed(("a", "b"))
        assert len(vectors) == 2
        assert mock_llm.embed_calls[0]["texts"] == ["a", "b"]


class TestInvalidParameters:

    @pytest.mark.asyncio
    async def test_empty_batch(self, fake_llm):
        with pytest.raises(InvalidParameterError):
            await EmbeddingGenerator(fake_llm).embed([])
        fake_llm.embed_async.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bare_string_rejected(self, fake_llm):
        with pytest.raises(InvalidParameterError):
            await EmbeddingGenerator(fake_llm).embed("cat")
        fake_llm.embed_async.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("dimensions", [0, -1])
    async def test_non_positive_dimensions(self, fake_llm, dimensions):
        with pytest.raises(InvalidParameterError):
            await EmbeddingGenerator(fake_llm).embed(["cat"], dimensions=dimensions)
        fake_llm.embed_async.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_string_input(self, fake_llm):
        with pytest.raises(InvalidParameterError):
            await EmbeddingGenerator(fake_llm).embed(["cat", 3])

    @pytest.mark.asyncio
    async def test_unsupported_dimensions_from_model(self):
        llm = MockLLM(supported_dimensions={256, 1024})
        generator = EmbeddingGenerator(llm)

        with pytest.raises(InvalidParameterError):
            await generator.embed(["cat", "dog"], dimensions=300)

    def test_constructor_rejects_bad_default(self, fake_llm):
        with pytest.raises(InvalidParameterError):
            EmbeddingGenerator(fake_llm, dimensions=0)


class TestFailurePropagation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ModelUnavailableError("connection refused"),
        ModelTimeoutError(timeout=30.0),
        AuthenticationError("bad key"),
    ])
    async def test_typed_errors_propagate_unchanged(self, fake_llm, error):
        fake_llm.embed_async.side_effect = error
        with pytest.raises(type(error)) as exc_info:
            await EmbeddingGenerator(fake_llm).embed(["cat"])
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_foreign_errors_are_wrapped(self, fake_llm):
        original = RuntimeError("socket closed unexpectedly")
        fake_llm.embed_async.side_effect = original

        with pytest.raises(PermanentError) as exc_info:
            await EmbeddingGenerator(fake_llm).embed(["cat"])
        assert exc_info.value.original_error is original

    @pytest.mark.asyncio
    async def test_count_mismatch(self, fake_llm):
        fake_llm.embed_async = AsyncMock(return_value=[[0.0] * 8])
        with pytest.raises(MalformedResponseError) as exc_info:
            await EmbeddingGenerator(fake_llm, dimensions=8).embed(["cat", "dog"])
        assert exc_info.value.details == {"expected": 2, "received": 1}

    @pytest.mark.asyncio
    async def test_wrong_vector_length(self, fake_llm):
        fake_llm.embed_async = AsyncMock(return_value=[[0.0] * 8, [0.0] * 7])
        with pytest.raises(MalformedResponseError) as exc_info:
            await EmbeddingGenerator(fake_llm, dimensions=8).embed(["cat", "dog"])
        assert exc_info.value.details["index"] == 1

    @pytest.mark.asyncio
    async def test_none_response(self, fake_llm):
        fake_llm.embed_async = AsyncMock(return_value=None)
        with pytest.raises(MalformedResponseError):
            await EmbeddingGenerator(fake_llm, dimensions=8).embed(["cat"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad", [None, "abcd", {"a": 1}, [0.0, "x", 0.0, 0.0], [0.0, None, 0.0, 0.0]])
    async def test_non_numeric_vector(self, fake_llm, bad):
        fake_llm.embed_async = AsyncMock(return_value=[[0.0] * 4, bad])
        with pytest.raises(MalformedResponseError) as exc_info:
            await EmbeddingGenerator(fake_llm, dimensions=4).embed(["cat", "dog"])
        assert exc_info.value.details["index"] == 1

    @pytest.mark.asyncio
    async def test_non_list_response(self, fake_llm):
        fake_llm.embed_async = AsyncMock(return_value=42)
        with pytest.raises(MalformedResponseError):
            await EmbeddingGenerator(fake_llm, dimensions=4).embed(["cat"])


class TestGenerateEmbeddings:

    @pytest.mark.asyncio
    async def test_one_shot(self, mock_llm):
        vectors = await generate_embeddings(["cat", "dog"], mock_llm, dimensions=64)
        assert [len(v) for v in vectors] == [64, 64]

    @pytest.mark.asyncio
    async def test_empty_batch(self, mock_llm):
        with pytest.raises(InvalidParameterError):
            await generate_embeddings([], mock_llm)
        assert mock_llm.embed_calls == []
