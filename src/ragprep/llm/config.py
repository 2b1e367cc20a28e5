"""
LLM Client Configuration Module.

This module provides configuration classes for the concrete language-model
client:
- Timeout settings for various operation types
- Retry count handed to the SDK client

The preprocessing components themselves never retry; timeouts and retries
belong to the client.
"""

from dataclasses import dataclass, field

import httpx

from ..errors import ConfigurationError


@dataclass
class TimeoutConfig:
    """
    Configuration for request timeouts.

    All timeout values are in seconds.

    Attributes:
        connect: Timeout for establishing connection
        read: Timeout for reading response
        total: Total timeout for entire request (None = unlimited)

    Example:
        config = TimeoutConfig(connect=10.0, read=60.0, total=120.0)
    """

    connect: float = 10.0
    read: float = 60.0
    total: float | None = 120.0

    def __post_init__(self):
        """Validate timeout values."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")
        if self.total is not None and self.total <= 0:
            raise ValueError("total timeout must be positive or None")

    @classmethod
    def fast(cls) -> "TimeoutConfig":
        """Preset for fast, low-latency operations (query rewriting)."""
        return cls(connect=5.0, read=30.0, total=60.0)

    @classmethod
    def standard(cls) -> "TimeoutConfig":
        """Standard preset for typical operations."""
        return cls(connect=10.0, read=60.0, total=120.0)

    @classmethod
    def long_running(cls) -> "TimeoutConfig":
        """Preset for long-running operations (e.g., large embedding batches)."""
        return cls(connect=15.0, read=300.0, total=600.0)

    @classmethod
    def from_preset(cls, name: str) -> "TimeoutConfig":
        """Look up a preset by name."""
        presets = {
            "fast": cls.fast,
            "standard": cls.standard,
            "long_running": cls.long_running,
        }
        if name not in presets:
            raise ConfigurationError(
                f"Unknown timeout preset: '{name}'",
                details={"available": list(presets)}
            )
        return presets[name]()

    def to_httpx(self) -> httpx.Timeout:
        """Convert to an httpx.Timeout (total doubles as the pool/write limit)."""
        return httpx.Timeout(self.total, connect=self.connect, read=self.read)


@dataclass
class LLMConfig:
    """
    Configuration for the language-model client.

    Attributes:
        timeout: Timeout configuration
        max_retries: Retry attempts performed inside the SDK client

    Example:
        config = LLMConfig(timeout=TimeoutConfig.fast(), max_retries=0)
    """

    timeout: TimeoutConfig = field(default_factory=TimeoutConfig.standard)
    max_retries: int = 2

    def __post_init__(self):
        """Validate configuration."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")

    @classmethod
    def default(cls) -> "LLMConfig":
        """Create default configuration."""
        return cls()


# Default configurations
DEFAULT_LLM_CONFIG = LLMConfig.default()
