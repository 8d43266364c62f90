"""Input validation for trade dates and symbols."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from eodproxy.core.exceptions import DataValidationError

_TRADE_DATE_RE = re.compile(r"[0-9]{8}")
SYMBOL_SEPARATOR = "."


def is_trade_date(value: Any) -> bool:
    """Return True when ``value`` is exactly eight ASCII digits."""
    return isinstance(value, str) and _TRADE_DATE_RE.fullmatch(value) is not None


def format_trade_date(value: str) -> str:
    """Convert ``YYYYMMDD`` to ``YYYY-MM-DD`` without calendar checks."""
    return f"{value[0:4]}-{value[4:6]}-{value[6:8]}"


def parse_trade_date(value: Any, message: str = "trade_date must be YYYYMMDD", field: str = "trade_date") -> str:
    """Validate a raw trade date and return it in ISO form."""
    if not is_trade_date(value):
        raise DataValidationError(message, field=field, details={"value": repr(value)})
    return format_trade_date(value)


def parse_date_range(start_date: Any, end_date: Any) -> tuple[str, str]:
    """Validate both range bounds together and return ISO strings."""
    if not is_trade_date(start_date) or not is_trade_date(end_date):
        raise DataValidationError(
            "start_date and end_date must be YYYYMMDD",
            field="start_date" if not is_trade_date(start_date) else "end_date",
        )
    return format_trade_date(start_date), format_trade_date(end_date)


def validate_symbol(symbol: Any) -> str:
    """Check that ``symbol`` looks like ``TICKER.EXCHANGE``."""
    if not isinstance(symbol, str) or SYMBOL_SEPARATOR not in symbol:
        raise DataValidationError(f"Invalid symbol format: {symbol}", field="symbols")
    return symbol


def require_symbol_list(symbols: Any) -> list[Any]:
    """Check that ``symbols`` is a non-empty list; entries are checked separately."""
    if isinstance(symbols, str) or not isinstance(symbols, Sequence) or len(symbols) == 0:
        raise DataValidationError("symbols must be a non-empty array", field="symbols")
    return list(symbols)


def split_symbol(symbol: str) -> tuple[str, str]:
    """Split ``TICKER.EXCHANGE`` on the first separator."""
    ticker, _, exchange = symbol.partition(SYMBOL_SEPARATOR)
    return ticker, exchange
