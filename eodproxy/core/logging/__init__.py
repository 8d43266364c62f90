"""Logging utilities."""

from eodproxy.core.logging.config import LogConfig
from eodproxy.core.logging.logger import (
    configure_logging,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "log_context",
    "logger",
]
