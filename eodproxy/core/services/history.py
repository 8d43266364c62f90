"""Daily history for a list of symbols over a date range."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from eodproxy.core.data.providers import EodDataSource, Record, SortOrder
from eodproxy.core.validation import parse_date_range, require_symbol_list, validate_symbol


@dataclass
class SymbolHistory:
    symbol: str
    rows: Any = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "rows": self.rows}


class HistoryService:
    """Fetches each symbol's bars one after another, in request order.

    Every symbol is validated before the first upstream call. The first
    failing fetch aborts the whole request; later symbols are not fetched.
    """

    def __init__(self, source: EodDataSource, order: SortOrder = SortOrder.ASCENDING) -> None:
        self.source = source
        self.order = order

    async def history(self, symbols: Any, start_date: Any, end_date: Any) -> list[SymbolHistory]:
        symbol_list = require_symbol_list(symbols)
        from_date, to_date = parse_date_range(start_date, end_date)
        checked = [validate_symbol(symbol) for symbol in symbol_list]

        data: list[SymbolHistory] = []
        for symbol in checked:
            rows: list[Record] = await self.source.fetch_history(symbol, from_date, to_date, self.order)
            data.append(SymbolHistory(symbol=symbol, rows=rows))
        logger.info("History assembled", symbols=len(data), from_date=from_date, to_date=to_date)
        return data
