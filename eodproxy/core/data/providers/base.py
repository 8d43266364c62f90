"""Data-source interface shared by the live and simulated providers."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, TypeVar

from loguru import logger

from eodproxy.core.exceptions import ProviderError
from eodproxy.core.monitoring import MetricsCollector, get_metrics_collector

Record = dict[str, Any]
T = TypeVar("T")


class SortOrder(str, Enum):
    """History sort order accepted by the upstream provider."""

    ASCENDING = "a"
    DESCENDING = "d"


class EodDataSource(ABC):
    """Fetches end-of-day records for exchanges and symbols.

    Implementations return upstream records untouched and signal failure by
    raising a :class:`ProviderError` subclass. Nothing is cached or retried.
    """

    name: str = "base"

    def __init__(self, metrics: MetricsCollector | None = None) -> None:
        self._metrics = metrics

    @property
    def metrics(self) -> MetricsCollector:
        return self._metrics or get_metrics_collector()

    @abstractmethod
    async def fetch_bulk_snapshot(self, exchange: str, date: str) -> Any:
        """Return every quote listed on ``exchange`` for ISO ``date``."""

    @abstractmethod
    async def fetch_history(
        self,
        symbol: str,
        from_date: str | None,
        to_date: str | None,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> Any:
        """Return the daily bars of ``symbol`` between two ISO dates."""

    async def aclose(self) -> None:
        """Release held resources."""

    async def _observed(self, operation: str, call: Callable[[], Awaitable[T]], **context: Any) -> T:
        """Run ``call`` while recording latency and outcome."""
        started = time.perf_counter()
        log = logger.bind(source=self.name, operation=operation, **context)
        log.debug("Upstream fetch started")
        try:
            result = await call()
        except ProviderError as e:
            self.metrics.observe_fetch(self.name, operation, time.perf_counter() - started, success=False)
            log.bind(error_code=e.error_code).error("Upstream fetch failed: {}", e.message)
            raise
        elapsed = time.perf_counter() - started
        self.metrics.observe_fetch(self.name, operation, elapsed)
        log.debug("Upstream fetch finished in {:.3f}s", elapsed)
        return result


__all__ = ["EodDataSource", "Record", "SortOrder"]
