"""Pytest configuration for the eodproxy test suite."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import pytest
from prometheus_client import CollectorRegistry

from eodproxy.core.config import ProxyConfig
from eodproxy.core.data.providers import EodDataSource, SortOrder
from eodproxy.core.monitoring import MetricsCollector, configure_metrics_collector

TEST_TOKEN = "test-bearer-token"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that call the real EODHD API.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: marks tests requiring network access and an EODHD token",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="integration tests require --run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class RecordingSource(EodDataSource):
    """In-memory data source that records every call.

    ``bulk`` and ``histories`` map keys to either a payload or an exception
    instance to raise. ``delays`` lets a key finish later than the others.
    """

    name = "recording"

    def __init__(self) -> None:
        super().__init__(MetricsCollector(registry=CollectorRegistry()))
        self.bulk: dict[str, Any] = {}
        self.histories: dict[str, Any] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.completed: list[str] = []
        self.cancelled: list[str] = []
        self.closed = False

    async def _respond(self, key: str, table: dict[str, Any]) -> Any:
        try:
            await asyncio.sleep(self.delays.get(key, 0))
        except asyncio.CancelledError:
            self.cancelled.append(key)
            raise
        self.completed.append(key)
        outcome = table.get(key, [])
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def fetch_bulk_snapshot(self, exchange: str, date: str) -> Any:
        self.calls.append(("bulk", exchange, date))
        return await self._respond(exchange, self.bulk)

    async def fetch_history(
        self,
        symbol: str,
        from_date: str | None,
        to_date: str | None,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> Any:
        self.calls.append(("history", symbol, from_date, to_date, SortOrder(order).value))
        return await self._respond(symbol, self.histories)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def recording_source() -> RecordingSource:
    return RecordingSource()


@pytest.fixture
def metrics() -> MetricsCollector:
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture(autouse=True)
def isolated_metrics(metrics: MetricsCollector):
    """Route the process-wide collector to a fresh registry per test."""

    configure_metrics_collector(metrics)
    yield metrics
    configure_metrics_collector(None)


def write_fixture(directory: Path, filename: str, payload: Any) -> Path:
    path = directory / filename
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """A fixture directory with two exchanges and one symbol history."""

    write_fixture(tmp_path, "bulk-SHG.json", [{"code": "600000"}, {"code": "600519"}])
    write_fixture(tmp_path, "bulk-SHE.json", [{"code": "000001"}])
    write_fixture(
        tmp_path,
        "eod-600519.SHG.json",
        [
            {"date": "2023-08-03", "close": 3.0},
            {"date": "2023-07-31", "close": 0.5},
            {"date": "2023-08-01", "close": 1.0},
            {"date": "2023-08-22", "close": 22.0},
            {"date": "2023-08-21", "close": 21.0},
        ],
    )
    return tmp_path


@pytest.fixture
def mock_config(fixtures_dir: Path) -> ProxyConfig:
    return ProxyConfig(bearer_token=TEST_TOKEN, mock_mode=True, fixtures_dir=str(fixtures_dir))
