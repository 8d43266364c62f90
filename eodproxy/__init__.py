"""eodproxy - bearer-token protected proxy for EODHD end-of-day data."""

__version__ = "0.1.0"

__all__ = ["__version__"]
