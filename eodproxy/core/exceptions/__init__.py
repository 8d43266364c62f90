"""Exception handling module."""

from eodproxy.core.exceptions.base import (
    ConfigurationError,
    DataValidationError,
    EodProxyError,
    FixtureError,
    MissingCredentialError,
    ProviderError,
    UpstreamError,
)
from eodproxy.core.exceptions.codes import ErrorCode

__all__ = [
    "EodProxyError",
    "DataValidationError",
    "ConfigurationError",
    "ProviderError",
    "MissingCredentialError",
    "UpstreamError",
    "FixtureError",
    "ErrorCode",
]
