"""HTTP surface of the proxy."""

from eodproxy.web.app import create_app

__all__ = ["create_app"]
