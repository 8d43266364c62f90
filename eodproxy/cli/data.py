"""Data commands: run the aggregation services without the HTTP layer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer

from eodproxy.core.data.providers import EodDataSource, create_data_source
from eodproxy.core.exceptions import DataValidationError, EodProxyError, ProviderError
from eodproxy.core.services import BulkSnapshotService, HistoryService

from .utils import (
    PROVIDER_EXIT_CODE,
    SYSTEM_EXIT_CODE,
    VALIDATION_EXIT_CODE,
    emit_error,
    emit_json,
    get_config,
)

T = TypeVar("T")


def register(app: typer.Typer) -> None:
    """Register data commands on the root application."""

    app.command("bulk-snapshot")(bulk_snapshot_command)
    app.command("history")(history_command)


def _run(source: EodDataSource, call: Callable[[], Awaitable[T]]) -> T:
    async def _wrapped() -> T:
        try:
            return await call()
        finally:
            await source.aclose()

    try:
        return asyncio.run(_wrapped())
    except DataValidationError as error:
        emit_error(error.message)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error
    except ProviderError as error:
        emit_error(error.message)
        raise typer.Exit(code=PROVIDER_EXIT_CODE) from error
    except EodProxyError as error:
        emit_error(error.message)
        raise typer.Exit(code=SYSTEM_EXIT_CODE) from error


def bulk_snapshot_command(
    ctx: typer.Context,
    trade_date: str = typer.Argument(..., help="Trade date (YYYYMMDD)."),
) -> None:
    """Print the combined SHG + SHE snapshot for TRADE_DATE."""

    source = create_data_source(get_config(ctx))
    service = BulkSnapshotService(source)
    snapshot = _run(source, lambda: service.snapshot(trade_date))
    emit_json({"ok": True, "count": snapshot.count, "items": snapshot.items})


def history_command(
    ctx: typer.Context,
    symbols: list[str] = typer.Argument(..., help="Symbols as TICKER.EXCHANGE."),
    start: str = typer.Option(..., "--start", help="Start date (YYYYMMDD)."),
    end: str = typer.Option(..., "--end", help="End date (YYYYMMDD)."),
) -> None:
    """Print ascending daily bars for each SYMBOL between --start and --end."""

    source = create_data_source(get_config(ctx))
    service = HistoryService(source)
    results = _run(source, lambda: service.history(symbols, start, end))
    emit_json({"ok": True, "data": [result.to_dict() for result in results]})
