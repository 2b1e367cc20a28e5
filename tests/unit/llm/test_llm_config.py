"""
Tests for LLM client configuration.

These tests verify:
- TimeoutConfig validation, presets and httpx conversion
- LLMConfig validation and presets
"""

import httpx
import pytest

from ragprep.errors import ConfigurationError
from ragprep.llm.config import (
    DEFAULT_LLM_CONFIG,
    LLMConfig,
    TimeoutConfig,
)


class TestTimeoutConfig:
    """Tests for TimeoutConfig dataclass."""

    def test_default_values(self):
        config = TimeoutConfig()
        assert config.connect == 10.0
        assert config.read == 60.0
        assert config.total == 120.0

    def test_none_total_allowed(self):
        """None total timeout means unlimited."""
        config = TimeoutConfig(total=None)
        assert config.total is None

    def test_invalid_connect_timeout(self):
        with pytest.raises(ValueError, match="connect"):
            TimeoutConfig(connect=0)
        with pytest.raises(ValueError, match="connect"):
            TimeoutConfig(connect=-1.0)

    def test_invalid_read_timeout(self):
        with pytest.raises(ValueError, match="read"):
            TimeoutConfig(read=0)

    def test_invalid_total_timeout(self):
        with pytest.raises(ValueError, match="total"):
            TimeoutConfig(total=0)

    def test_presets(self):
        assert TimeoutConfig.fast().total == 60.0
        assert TimeoutConfig.standard().total == 120.0
        assert TimeoutConfig.long_running().read == 300.0

    def test_from_preset(self):
        assert TimeoutConfig.from_preset("fast") == TimeoutConfig.fast()
        assert TimeoutConfig.from_preset("long_running") == TimeoutConfig.long_running()

    def test_from_unknown_preset(self):
        with pytest.raises(ConfigurationError, match="glacial"):
            TimeoutConfig.from_preset("glacial")

    def test_to_httpx_conversion(self):
        timeout = TimeoutConfig(connect=5.0, read=30.0, total=45.0).to_httpx()
        assert isinstance(timeout, httpx.Timeout)
        assert timeout.connect == 5.0
        assert timeout.read == 30.0
        assert timeout.write == 45.0


class TestLLMConfig:
    """Tests for LLMConfig dataclass."""

    def test_default_values(self):
        config = LLMConfig()
        assert isinstance(config.timeout, TimeoutConfig)
        assert config.max_retries == 2

    def test_invalid_max_retries(self):
        with pytest.raises(ValueError, match="max_retries"):
            LLMConfig(max_retries=-1)

    def test_module_defaults(self):
        assert DEFAULT_LLM_CONFIG == LLMConfig.default()
