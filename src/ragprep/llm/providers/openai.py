"""OpenAI-compatible language-model client."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import openai
from loguru import logger
from openai import AsyncOpenAI

from ragprep.defaults import DEFAULT_EMBEDDING_MODEL, DEFAULT_OPTIMIZER_MODEL
from ragprep.errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidParameterError,
    InvalidResponseError,
    ModelTimeoutError,
    ModelUnavailableError,
    QuotaExceededError,
    RagPrepError,
    RateLimitError,
    classify_http_error,
    wrap_exception,
)
from ragprep.llm.base import BaseLLM
from ragprep.llm.config import DEFAULT_LLM_CONFIG, LLMConfig


def translate_openai_error(error: Exception, context: str) -> RagPrepError:
    """Map an exception raised by the openai SDK onto the ragprep hierarchy."""
    message = f"{context}: {error}"

    # APITimeoutError subclasses APIConnectionError, so it goes first
    if isinstance(error, openai.APITimeoutError):
        return ModelTimeoutError(message=message, original_error=error)
    if isinstance(error, openai.APIConnectionError):
        return ModelUnavailableError(message=message, original_error=error)
    if isinstance(error, openai.RateLimitError):
        details = {"status_code": error.status_code}
        if getattr(error, "code", None) == "insufficient_quota":
            return QuotaExceededError(message=message, details=details, original_error=error)
        retry_after = error.response.headers.get("retry-after")
        try:
            retry_after = float(retry_after) if retry_after is not None else None
        except ValueError:
            retry_after = None
        return RateLimitError(message=message, retry_after=retry_after, details=details, original_error=error)
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationError(
            message=message, details={"status_code": error.status_code}, original_error=error
        )
    if isinstance(error, (openai.BadRequestError, openai.NotFoundError, openai.UnprocessableEntityError)):
        details = {"status_code": error.status_code}
        if getattr(error, "param", None):
            details["param"] = error.param
        return InvalidParameterError(message=message, details=details, original_error=error)
    if isinstance(error, openai.APIStatusError):
        classified = classify_http_error(error.status_code, message, dict(error.response.headers))
        classified.original_error = error
        return classified
    return wrap_exception(error, context=context)


class OpenAILLM(BaseLLM):
    """
    Client for the OpenAI API or any OpenAI-compatible endpoint.

    When an ``AsyncOpenAI`` instance is injected the caller owns its
    lifecycle. Otherwise a client is built for each call and closed as soon
    as the call completes, so no connection outlives a request.

    Example:
        >>> llm = OpenAILLM(api_key="sk-...")
        >>> text = await llm.chat_async([{"role": "user", "content": "hi"}])
    """

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        config: LLMConfig | None = None,
        chat_model: str = DEFAULT_OPTIMIZER_MODEL,
        embedding_model: str = DEFAULT_EMBEDDING_MODEL,
    ):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url
        self.config = config or DEFAULT_LLM_CONFIG
        self.chat_model = chat_model
        self.embedding_model = embedding_model
        logger.debug(
            f"OpenAILLM ready (chat_model={chat_model}, embedding_model={embedding_model}, "
            f"injected_client={client is not None})"
        )

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[AsyncOpenAI]:
        if self.client is not None:
            yield self.client
            return

        try:
            client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.config.timeout.to_httpx(),
                max_retries=self.config.max_retries,
            )
        except openai.OpenAIError as e:
            raise ConfigurationError(
                "Could not create OpenAI client - is OPENAI_API_KEY set?", original_error=e
            ) from e

        async with client:
            yield client

    async def chat_async(
        self,
        messages: list[dict[str, str]],
        model: str | None = None,
        **kwargs: Any
    ) -> str | None:
        model = model or self.chat_model
        async with self._client() as client:
            try:
                response = await client.chat.completions.create(
                    model=model,
                    messages=messages,
                    **kwargs,
                )
            except openai.OpenAIError as e:
                raise translate_openai_error(e, "Chat completion") from e

        if not response.choices:
            raise InvalidResponseError(
                "Chat completion returned no choices", details={"model": model}
            )
        return response.choices[0].message.content

    async def embed_async(
        self,
        texts: list[str],
        model: str | None = None,
        dimensions: int | None = None
    ) -> list[list[float]]:
        model = model or self.embedding_model
        params: dict[str, Any] = {"model": model, "input": texts}
        if dimensions is not None:
            params["dimensions"] = dimensions

        async with self._client() as client:
            try:
                response = await client.embeddings.create(**params)
            except openai.OpenAIError as e:
                raise translate_openai_error(e, "Embedding request") from e

        data = sorted(response.data, key=lambda item: item.index)
        return [item.embedding for item in data]
