"""Tests for the fixture-backed data source."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from eodproxy.core.data.providers import SimulatedSource, SortOrder
from eodproxy.core.exceptions import FixtureError
from eodproxy.core.monitoring import MetricsCollector


@pytest.mark.asyncio
async def test_bulk_snapshot_returns_fixture_as_is(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    assert await source.fetch_bulk_snapshot("SHG", "2023-08-21") == [{"code": "600000"}, {"code": "600519"}]


@pytest.mark.asyncio
async def test_bulk_snapshot_missing_fixture(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    with pytest.raises(FixtureError, match="Fixture not found: bulk-XNYS.json") as exc_info:
        await source.fetch_bulk_snapshot("XNYS", "2023-08-21")
    assert exc_info.value.fixture == "bulk-XNYS.json"


@pytest.mark.asyncio
async def test_unparsable_fixture(fixtures_dir: Path) -> None:
    (fixtures_dir / "bulk-SHG.json").write_text("[{", encoding="utf-8")
    source = SimulatedSource(fixtures_dir)

    with pytest.raises(FixtureError, match="Failed to parse fixture bulk-SHG.json"):
        await source.fetch_bulk_snapshot("SHG", "2023-08-21")


@pytest.mark.asyncio
async def test_history_filters_inclusive_range_and_sorts_ascending(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    rows = await source.fetch_history("600519.SHG", "2023-08-01", "2023-08-21", SortOrder.ASCENDING)

    assert [row["date"] for row in rows] == ["2023-08-01", "2023-08-03", "2023-08-21"]


@pytest.mark.asyncio
async def test_history_descending_order(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    rows = await source.fetch_history("600519.SHG", "2023-08-01", "2023-08-21", "d")

    assert [row["date"] for row in rows] == ["2023-08-21", "2023-08-03", "2023-08-01"]


@pytest.mark.asyncio
async def test_history_missing_bounds_are_unbounded(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    everything = await source.fetch_history("600519.SHG", None, None)
    up_to = await source.fetch_history("600519.SHG", None, "2023-08-01")
    from_ = await source.fetch_history("600519.SHG", "2023-08-21", "")

    assert len(everything) == 5
    assert [row["date"] for row in up_to] == ["2023-07-31", "2023-08-01"]
    assert [row["date"] for row in from_] == ["2023-08-21", "2023-08-22"]


@pytest.mark.asyncio
async def test_history_requires_array_fixture(fixtures_dir: Path) -> None:
    (fixtures_dir / "eod-X.Y.json").write_text(json.dumps({"date": "2023-08-01"}), encoding="utf-8")
    source = SimulatedSource(fixtures_dir)

    with pytest.raises(FixtureError, match="must contain a JSON array"):
        await source.fetch_history("X.Y", "2023-08-01", "2023-08-02")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "rows",
    [
        [{"date": "2023-08-01"}, None],
        [{"date": "2023-08-01"}, {"date": 20230802}],
        ["2023-08-01"],
    ],
)
async def test_history_rejects_malformed_rows(fixtures_dir: Path, rows: list) -> None:
    (fixtures_dir / "eod-X.Y.json").write_text(json.dumps(rows), encoding="utf-8")
    source = SimulatedSource(fixtures_dir)

    with pytest.raises(FixtureError, match="Fixture eod-X.Y.json has malformed rows"):
        await source.fetch_history("X.Y", None, None)


@pytest.mark.asyncio
async def test_history_missing_fixture(fixtures_dir: Path) -> None:
    source = SimulatedSource(fixtures_dir)

    with pytest.raises(FixtureError, match="Fixture not found: eod-000002.SHE.json"):
        await source.fetch_history("000002.SHE", "2023-08-01", "2023-08-21")


@pytest.mark.asyncio
async def test_fetches_are_recorded_in_metrics(fixtures_dir: Path, metrics: MetricsCollector) -> None:
    source = SimulatedSource(fixtures_dir, metrics=metrics)

    await source.fetch_bulk_snapshot("SHG", "2023-08-21")
    with pytest.raises(FixtureError):
        await source.fetch_bulk_snapshot("XNYS", "2023-08-21")

    labels = {"source": "simulated", "operation": "bulk_snapshot"}
    assert metrics.registry.get_sample_value("eodproxy_upstream_requests_total", labels) == 2.0
    assert metrics.registry.get_sample_value("eodproxy_upstream_failures_total", labels) == 1.0


@pytest.mark.asyncio
async def test_packaged_fixtures_are_usable() -> None:
    from eodproxy.core.config import DEFAULT_FIXTURES_DIR

    source = SimulatedSource(DEFAULT_FIXTURES_DIR)

    rows = await source.fetch_history("600519.SHG", "2023-08-15", "2023-08-18")

    assert [row["date"] for row in rows] == ["2023-08-15", "2023-08-16", "2023-08-17", "2023-08-18"]
