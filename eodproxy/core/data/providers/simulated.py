"""Offline data source backed by JSON fixtures."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from eodproxy.core.data.providers.base import EodDataSource, Record, SortOrder
from eodproxy.core.exceptions import FixtureError
from eodproxy.core.monitoring import MetricsCollector


def _is_row(row: Any) -> bool:
    return isinstance(row, dict) and isinstance(row.get("date", ""), (str, type(None)))


def _in_range(row: Record, from_date: str | None, to_date: str | None) -> bool:
    row_date = row.get("date")
    if from_date and (row_date is None or row_date < from_date):
        return False
    if to_date and (row_date is None or row_date > to_date):
        return False
    return True


class SimulatedSource(EodDataSource):
    """Serves pre-recorded responses from ``fixtures_dir``.

    Bulk snapshots are read from ``bulk-<EXCHANGE>.json`` and histories from
    ``eod-<TICKER>.<EXCHANGE>.json``. History rows are filtered to the
    requested range and sorted by their ISO ``date`` field.
    """

    name = "simulated"

    def __init__(self, fixtures_dir: str | Path, metrics: MetricsCollector | None = None) -> None:
        super().__init__(metrics)
        self.fixtures_dir = Path(fixtures_dir)

    def fixture_path(self, filename: str) -> Path:
        return self.fixtures_dir / filename

    def _read_fixture(self, filename: str) -> Any:
        path = self.fixture_path(filename)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FixtureError(f"Fixture not found: {filename}", self.name, fixture=filename) from e
        except OSError as e:
            raise FixtureError(f"Failed to read fixture {filename}: {e}", self.name, fixture=filename) from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise FixtureError(f"Failed to parse fixture {filename}: {e}", self.name, fixture=filename) from e

    async def load_fixture(self, filename: str) -> Any:
        return await asyncio.to_thread(self._read_fixture, filename)

    async def fetch_bulk_snapshot(self, exchange: str, date: str) -> Any:
        return await self._observed(
            "bulk_snapshot",
            lambda: self.load_fixture(f"bulk-{exchange}.json"),
            exchange=exchange,
            date=date,
        )

    async def fetch_history(
        self,
        symbol: str,
        from_date: str | None,
        to_date: str | None,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> list[Record]:
        async def _history() -> list[Record]:
            filename = f"eod-{symbol}.json"
            rows = await self.load_fixture(filename)
            if not isinstance(rows, list):
                raise FixtureError(f"Fixture {filename} must contain a JSON array", self.name, fixture=filename)
            if not all(_is_row(row) for row in rows):
                raise FixtureError(f"Fixture {filename} has malformed rows", self.name, fixture=filename)
            filtered = [row for row in rows if _in_range(row, from_date, to_date)]
            return sorted(
                filtered,
                key=lambda row: row.get("date") or "",
                reverse=SortOrder(order) is SortOrder.DESCENDING,
            )

        return await self._observed("history", _history, symbol=symbol)
