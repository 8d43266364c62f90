"""Tests for trade date and symbol validation."""

from __future__ import annotations

import pytest

from eodproxy.core.exceptions import DataValidationError
from eodproxy.core.validation import (
    format_trade_date,
    is_trade_date,
    parse_date_range,
    parse_trade_date,
    require_symbol_list,
    split_symbol,
    validate_symbol,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("20230821", "2023-08-21"),
        ("19991231", "1999-12-31"),
        ("00000101", "0000-01-01"),
        ("20230230", "2023-02-30"),
    ],
)
def test_trade_date_is_regrouped_without_calendar_checks(raw: str, expected: str) -> None:
    assert parse_trade_date(raw) == expected
    assert format_trade_date(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["2023-08-21", "2023082", "202308211", "", None, 20230821, "2023O821", "20230821\n", "２０２３０８２１"],
)
def test_invalid_trade_dates_are_rejected(raw: object) -> None:
    assert is_trade_date(raw) is False
    with pytest.raises(DataValidationError, match="trade_date must be YYYYMMDD") as exc_info:
        parse_trade_date(raw)
    assert exc_info.value.status_code == 400
    assert exc_info.value.field == "trade_date"


def test_date_range_requires_both_bounds() -> None:
    assert parse_date_range("20230801", "20230821") == ("2023-08-01", "2023-08-21")

    with pytest.raises(DataValidationError, match="start_date and end_date must be YYYYMMDD") as exc_info:
        parse_date_range("20230801", None)
    assert exc_info.value.field == "end_date"

    with pytest.raises(DataValidationError) as exc_info:
        parse_date_range("2023-08-01", "20230821")
    assert exc_info.value.field == "start_date"


@pytest.mark.parametrize("symbols", [None, [], "600519.SHG", {"a": 1}, 5])
def test_symbol_list_must_be_non_empty_list(symbols: object) -> None:
    with pytest.raises(DataValidationError, match="symbols must be a non-empty array"):
        require_symbol_list(symbols)


def test_symbol_list_entries_are_not_checked_here() -> None:
    assert require_symbol_list(["600519.SHG", 42]) == ["600519.SHG", 42]


def test_symbol_requires_separator() -> None:
    assert validate_symbol("600519.SHG") == "600519.SHG"
    with pytest.raises(DataValidationError, match="Invalid symbol format: 600519"):
        validate_symbol("600519")
    with pytest.raises(DataValidationError, match="Invalid symbol format: 42"):
        validate_symbol(42)


def test_split_symbol_uses_first_separator() -> None:
    assert split_symbol("600519.SHG") == ("600519", "SHG")
    assert split_symbol("BRK.B.US") == ("BRK", "B.US")
