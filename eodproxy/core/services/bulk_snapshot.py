"""Combined single-day snapshot across the Shanghai and Shenzhen exchanges."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from eodproxy.core.data.providers import EodDataSource, Record
from eodproxy.core.validation import parse_trade_date

DEFAULT_EXCHANGES: tuple[str, str] = ("SHG", "SHE")


@dataclass
class BulkSnapshot:
    """Quotes from every exchange, concatenated in exchange order."""

    date: str
    items: list[Record] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


class BulkSnapshotService:
    """Fetches one trade date from each exchange concurrently.

    The result is all-or-nothing: if any exchange fails the remaining fetches
    are cancelled and the first error propagates.
    """

    def __init__(self, source: EodDataSource, exchanges: tuple[str, ...] = DEFAULT_EXCHANGES) -> None:
        self.source = source
        self.exchanges = exchanges

    async def snapshot(self, trade_date: Any) -> BulkSnapshot:
        date = parse_trade_date(trade_date)
        tasks = [asyncio.ensure_future(self.source.fetch_bulk_snapshot(exchange, date)) for exchange in self.exchanges]
        try:
            results = await asyncio.gather(*tasks)
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        items: list[Record] = []
        for exchange, result in zip(self.exchanges, results):
            if isinstance(result, list):
                items.extend(result)
            else:
                logger.warning("Ignoring non-list bulk payload", exchange=exchange, payload_type=type(result).__name__)
        logger.info("Bulk snapshot assembled", date=date, count=len(items))
        return BulkSnapshot(date=date, items=items)
