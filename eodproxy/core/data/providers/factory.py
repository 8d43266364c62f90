"""Selects the data source for the process from configuration."""

from __future__ import annotations

import httpx
from loguru import logger

from eodproxy.core.config import ProxyConfig
from eodproxy.core.data.providers.base import EodDataSource
from eodproxy.core.data.providers.live import LiveSource
from eodproxy.core.data.providers.simulated import SimulatedSource
from eodproxy.core.monitoring import MetricsCollector


def create_data_source(
    config: ProxyConfig,
    *,
    client: httpx.AsyncClient | None = None,
    metrics: MetricsCollector | None = None,
) -> EodDataSource:
    """Build the simulated or live source once, at startup."""

    if config.mock_mode:
        logger.info("Using simulated data source", fixtures_dir=config.fixtures_dir)
        return SimulatedSource(config.fixtures_dir, metrics=metrics)

    if not config.eodhd_api_token:
        # not fatal: every fetch reports the missing token to the caller
        logger.warning("EODHD_API_TOKEN is not configured; live fetches will fail")
    logger.info("Using live EODHD data source", api_base=config.api_base)
    return LiveSource(
        config.eodhd_api_token,
        api_base=config.api_base,
        timeout=config.fetch_timeout,
        client=client,
        metrics=metrics,
    )
