"""Request validation helpers."""

from eodproxy.core.validation.request import (
    SYMBOL_SEPARATOR,
    format_trade_date,
    is_trade_date,
    parse_date_range,
    parse_trade_date,
    require_symbol_list,
    split_symbol,
    validate_symbol,
)

__all__ = [
    "SYMBOL_SEPARATOR",
    "format_trade_date",
    "is_trade_date",
    "parse_date_range",
    "parse_trade_date",
    "require_symbol_list",
    "split_symbol",
    "validate_symbol",
]
