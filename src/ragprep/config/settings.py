import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ragprep.defaults import (
    DEFAULT_EMBEDDING_DIMENSIONS,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_OPTIMIZER_MODEL,
)

# This file: src/ragprep/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Language model client
    LLM_TYPE: str = Field(default="openai", description="Registered LLM client type")
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API Key")
    OPENAI_BASE_URL: Optional[str] = Field(default=None, description="OpenAI-compatible endpoint")
    LLM_TIMEOUT_PRESET: str = Field(default="standard", description="Timeout preset: fast, standard, long_running")
    LLM_MAX_RETRIES: int = Field(default=2, ge=0, description="Retries performed by the SDK client")

    # Models
    OPTIMIZER_MODEL: str = Field(default=DEFAULT_OPTIMIZER_MODEL, description="Chat model used for query rewriting")
    EMBEDDING_MODEL: str = Field(default=DEFAULT_EMBEDDING_MODEL, description="Embedding model")
    # Every index write and query must share this value
    EMBEDDING_DIMENSIONS: int = Field(default=DEFAULT_EMBEDDING_DIMENSIONS, gt=0, description="Embedding vector length")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        LLM_TYPE=os.getenv("LLM_TYPE", "openai"),
        OPENAI_API_KEY=os.getenv("OPENAI_API_KEY"),
        OPENAI_BASE_URL=os.getenv("OPENAI_BASE_URL"),
        LLM_TIMEOUT_PRESET=os.getenv("LLM_TIMEOUT_PRESET", "standard"),
        LLM_MAX_RETRIES=int(os.getenv("LLM_MAX_RETRIES", "2")),
        OPTIMIZER_MODEL=os.getenv("OPTIMIZER_MODEL", DEFAULT_OPTIMIZER_MODEL),
        EMBEDDING_MODEL=os.getenv("EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL),
        EMBEDDING_DIMENSIONS=int(os.getenv("EMBEDDING_DIMENSIONS", str(DEFAULT_EMBEDDING_DIMENSIONS))),
    )

# Global settings instance
settings = load_settings()
