"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class AcquisitionMode(str, Enum):
    """Where profile data comes from."""
    STRUCTURED = "structured"
    UNSTRUCTURED = "unstructured"


class CacheBackend(str, Enum):
    """Cache backend type."""
    MEMORY = "memory"
    NONE = "none"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class CardConfig(BaseSettings):
    """Configuration for the hrcard renderer."""

    # Upstream settings
    acquisition_mode: AcquisitionMode = AcquisitionMode.STRUCTURED
    upstream_base_url: str = "https://www.hackerrank.com"
    user_agent: str = DEFAULT_USER_AGENT

    # Browser settings (unstructured mode only)
    headless: bool = True
    browser_timeout_ms: int = 30000

    # Cache settings
    cache_backend: CacheBackend = CacheBackend.MEMORY
    cache_ttl_seconds: int = 600
    cache_max_entries: int = 1024

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "HRCARD_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
