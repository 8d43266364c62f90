"""Error codes shared across the proxy."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers attached to every proxy error."""

    GENERAL = "GENERAL_ERROR"
    VALIDATION = "VALIDATION_ERROR"
    CONFIGURATION = "CONFIGURATION_ERROR"
    PROVIDER = "PROVIDER_ERROR"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    UPSTREAM = "UPSTREAM_ERROR"
    FIXTURE = "FIXTURE_ERROR"
