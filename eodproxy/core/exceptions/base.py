"""Core exception classes for eodproxy."""

from typing import Any

from eodproxy.core.exceptions.codes import ErrorCode


class EodProxyError(Exception):
    """Base exception for eodproxy."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL.value,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: Human readable message, returned to API callers.
            error_code: Stable error code.
            details: Extra context for logs.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class DataValidationError(EodProxyError):
    """Client input failed validation."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field:
            super_details["field"] = field
        super().__init__(message, ErrorCode.VALIDATION.value, super_details)
        self.field = field


class ConfigurationError(EodProxyError):
    """The server is missing configuration it needs to serve a request."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting:
            super_details["setting"] = setting
        super().__init__(message, ErrorCode.CONFIGURATION.value, super_details)
        self.setting = setting


class ProviderError(EodProxyError):
    """Fetching from a data source failed."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: str = ErrorCode.PROVIDER.value,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)
        self.provider_name = provider_name


class MissingCredentialError(ProviderError):
    """The upstream access token is not configured."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, provider_name, ErrorCode.MISSING_CREDENTIAL.value, details)


class UpstreamError(ProviderError):
    """The upstream provider answered with a non-success status or was unreachable."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, ErrorCode.UPSTREAM.value, super_details)
        self.upstream_status = status_code


class FixtureError(ProviderError):
    """A fixture file is missing or cannot be parsed."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        fixture: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if fixture:
            super_details["fixture"] = fixture
        super().__init__(message, provider_name, ErrorCode.FIXTURE.value, super_details)
        self.fixture = fixture
