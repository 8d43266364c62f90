"""Configuration management for the proxy process."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from loguru import logger

from eodproxy.core.exceptions import ConfigurationError

DEFAULT_API_BASE = "https://eodhd.com/api"
DEFAULT_FIXTURES_DIR = str(Path(__file__).resolve().parents[2] / "fixtures")

_TRUTHY = {"1", "true"}


@dataclass(frozen=True)
class ProxyConfig:
    """Process-wide proxy configuration, built once at startup."""

    bearer_token: str = ""
    mock_mode: bool = False
    eodhd_api_token: str = ""
    api_base: str = DEFAULT_API_BASE
    fetch_timeout: float = 60.0
    fixtures_dir: str = DEFAULT_FIXTURES_DIR
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            raise ConfigurationError("fetch_timeout must be positive", setting="fetch_timeout")
        if not 0 < self.port < 65536:
            raise ConfigurationError("port must be between 1 and 65535", setting="port")

    @property
    def data_source_mode(self) -> str:
        return "simulated" if self.mock_mode else "live"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ProxyConfig":
        """Build a config from a flat dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in config_dict.items() if key in known}
        unknown = {key: value for key, value in config_dict.items() if key not in known}
        if unknown:
            values["extra"] = {**values.get("extra", {}), **unknown}
        return cls(**values)

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        """Convert to a dictionary, masking secrets unless ``redact`` is False."""
        data = asdict(self)
        if redact:
            for secret in ("bearer_token", "eodhd_api_token"):
                if data[secret]:
                    data[secret] = "***"
        return data


def _parse_timeout(raw: str) -> float:
    """Read ``FETCH_TIMEOUT`` as seconds.

    An explicit ``ms`` or ``s`` suffix sets the unit. Bare numbers above 1000
    are taken as milliseconds, the unit the setting historically carried.
    """
    text = raw.strip().lower()
    if text.endswith("ms"):
        return float(text[:-2]) / 1000
    if text.endswith("s"):
        return float(text[:-1])
    value = float(text)
    return value / 1000 if value > 1000 else value


def load_config_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read configuration overrides from environment variables."""
    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}

    bearer_token = env.get("PROXY_BEARER_TOKEN")
    if bearer_token is not None:
        config["bearer_token"] = bearer_token
    mock_mode = env.get("MOCK_MODE")
    if mock_mode is not None:
        config["mock_mode"] = mock_mode.strip().lower() in _TRUTHY
    api_token = env.get("EODHD_API_TOKEN")
    if api_token is not None:
        config["eodhd_api_token"] = api_token
    api_base = env.get("EODHD_API_BASE")
    if api_base:
        config["api_base"] = api_base.rstrip("/")
    fixtures_dir = env.get("EODHD_FIXTURES_DIR")
    if fixtures_dir:
        config["fixtures_dir"] = fixtures_dir
    log_level = env.get("LOG_LEVEL")
    if log_level:
        config["log_level"] = log_level.upper()
    host = env.get("HOST")
    if host:
        config["host"] = host

    try:
        fetch_timeout = env.get("FETCH_TIMEOUT")
        if fetch_timeout:
            config["fetch_timeout"] = _parse_timeout(fetch_timeout)
        port = env.get("PORT")
        if port:
            config["port"] = int(port)
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric environment value: {e}") from e

    return config


class ConfigManager:
    """Layers an optional TOML file under environment overrides."""

    def __init__(self, config_path: Path | None = None, environ: Mapping[str, str] | None = None):
        """Initialise the manager.

        Args:
            config_path: TOML file path. Missing files are ignored.
            environ: Environment mapping, ``os.environ`` when omitted.
        """
        self.config_path = config_path
        self.environ = environ
        self.config = self._load_config()

    def _load_file(self) -> dict[str, Any]:
        if self.config_path is None or not self.config_path.exists():
            return {}
        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load config from {self.config_path}: {e}") from e
        # accept both a flat file and a [proxy] table
        return dict(data.get("proxy", data))

    def _load_config(self) -> ProxyConfig:
        config_dict = self._load_file()
        config_dict.update(load_config_from_env(self.environ))
        config = ProxyConfig.from_dict(config_dict)
        logger.debug("Loaded proxy configuration", config=config.to_dict())
        return config

    def get_config(self) -> ProxyConfig:
        """Return the loaded configuration."""
        return self.config


def load_config(config_path: Path | None = None) -> ProxyConfig:
    """Load configuration once at process start."""
    if config_path is None:
        env_path = os.getenv("EODPROXY_CONFIG")
        config_path = Path(env_path) if env_path else None
    return ConfigManager(config_path).get_config()
