"""LLM factory for creating language-model clients."""

from typing import Any

from loguru import logger

from ..config.settings import Settings
from ..errors import ConfigurationError
from .base import BaseLLM
from .config import LLMConfig, TimeoutConfig
from .providers.mock import MockLLM
from .providers.openai import OpenAILLM


class LLMFactory:
    """Factory for creating LLM clients based on type.

    This factory maintains a registry of available client types
    and creates instances based on string identifiers.
    """

    _registry: dict[str, type[BaseLLM]] = {
        "openai": OpenAILLM,
        "mock": MockLLM,
    }

    @classmethod
    def create(cls, llm_type: str, **params: Any) -> BaseLLM:
        """Create an LLM client by type.

        Args:
            llm_type: Type identifier (e.g., "openai")
            **params: Initialization parameters for the client

        Returns:
            LLM client instance

        Raises:
            ConfigurationError: If LLM type is not registered
        """
        if llm_type not in cls._registry:
            available = ", ".join(cls._registry.keys()) if cls._registry else "none"
            raise ConfigurationError(
                f"Unknown LLM type: '{llm_type}'. "
                f"Available types: {available}"
            )

        llm_class = cls._registry[llm_type]
        logger.debug(f"Creating {llm_class.__name__} with params: {sorted(params)}")

        return llm_class(**params)

    @classmethod
    def from_settings(cls, settings: Settings) -> BaseLLM:
        """Create the client described by application settings."""
        if settings.LLM_TYPE != "openai":
            return cls.create(settings.LLM_TYPE)

        config = LLMConfig(
            timeout=TimeoutConfig.from_preset(settings.LLM_TIMEOUT_PRESET),
            max_retries=settings.LLM_MAX_RETRIES,
        )
        return cls.create(
            "openai",
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            config=config,
            chat_model=settings.OPTIMIZER_MODEL,
            embedding_model=settings.EMBEDDING_MODEL,
        )

    @classmethod
    def register(cls, llm_type: str, llm_class: type[BaseLLM]):
        """Register a new LLM client type.

        Args:
            llm_type: Type identifier
            llm_class: LLM class to register

        Raises:
            TypeError: If llm_class is not a subclass of BaseLLM
        """
        if not issubclass(llm_class, BaseLLM):
            raise TypeError(
                f"{llm_class.__name__} must be a subclass of BaseLLM"
            )

        cls._registry[llm_type] = llm_class
        logger.info(f"Registered LLM type '{llm_type}': {llm_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        """Get list of available LLM types."""
        return list(cls._registry.keys())
