"""Unit tests for configuration management."""

import pytest

from hrcard.config import CardConfig, AcquisitionMode, CacheBackend, LogFormat


class TestCardConfigDefaults:
    """Test default configuration values."""

    def test_default_acquisition_mode(self):
        config = CardConfig()
        assert config.acquisition_mode == AcquisitionMode.STRUCTURED

    def test_default_cache_backend(self):
        config = CardConfig()
        assert config.cache_backend == CacheBackend.MEMORY

    def test_default_cache_ttl_is_ten_minutes(self):
        config = CardConfig()
        assert config.cache_ttl_seconds == 600

    def test_default_cache_is_bounded(self):
        config = CardConfig()
        assert config.cache_max_entries > 0

    def test_default_log_format(self):
        config = CardConfig()
        assert config.log_format == LogFormat.CONSOLE

    def test_default_user_agent_is_browser_like(self):
        config = CardConfig()
        assert config.user_agent.startswith("Mozilla/5.0")


class TestCardConfigEnvVars:
    """Test configuration from environment variables."""

    def test_acquisition_mode_from_env(self, monkeypatch):
        monkeypatch.setenv("HRCARD_ACQUISITION_MODE", "unstructured")
        config = CardConfig()
        assert config.acquisition_mode == AcquisitionMode.UNSTRUCTURED

    def test_cache_backend_from_env(self, monkeypatch):
        monkeypatch.setenv("HRCARD_CACHE_BACKEND", "none")
        config = CardConfig()
        assert config.cache_backend == CacheBackend.NONE

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("HRCARD_LOG_LEVEL", "DEBUG")
        config = CardConfig()
        assert config.log_level == "DEBUG"

    def test_cache_ttl_from_env(self, monkeypatch):
        monkeypatch.setenv("HRCARD_CACHE_TTL_SECONDS", "60")
        config = CardConfig()
        assert config.cache_ttl_seconds == 60

    def test_invalid_mode_rejected(self, monkeypatch):
        monkeypatch.setenv("HRCARD_ACQUISITION_MODE", "carrier-pigeon")
        with pytest.raises(ValueError):
            CardConfig()


class TestEnums:
    """Test enum values."""

    def test_acquisition_modes(self):
        assert AcquisitionMode.STRUCTURED.value == "structured"
        assert AcquisitionMode.UNSTRUCTURED.value == "unstructured"

    def test_cache_backends(self):
        assert CacheBackend.MEMORY.value == "memory"
        assert CacheBackend.NONE.value == "none"
