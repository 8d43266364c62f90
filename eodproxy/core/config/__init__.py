"""Configuration management module."""

from eodproxy.core.config.settings import (
    DEFAULT_API_BASE,
    DEFAULT_FIXTURES_DIR,
    ConfigManager,
    ProxyConfig,
    load_config,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "ProxyConfig",
    "load_config",
    "load_config_from_env",
    "DEFAULT_API_BASE",
    "DEFAULT_FIXTURES_DIR",
]
