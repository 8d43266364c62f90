"""EODHD HTTP data source."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from eodproxy.core.config import DEFAULT_API_BASE
from eodproxy.core.data.providers.base import EodDataSource, SortOrder
from eodproxy.core.exceptions import MissingCredentialError, UpstreamError
from eodproxy.core.monitoring import MetricsCollector
from eodproxy.core.validation import split_symbol


def _path_segment(value: str) -> str:
    """Percent-encode ``value`` as a single URL path segment."""
    segment = quote(value, safe="")
    if segment in {".", ".."}:
        segment = segment.replace(".", "%2E")
    return segment


class LiveSource(EodDataSource):
    """Reads end-of-day data from the EODHD REST API."""

    name = "eodhd"

    def __init__(
        self,
        api_token: str,
        *,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        super().__init__(metrics)
        self.api_token = api_token
        self.api_base = api_base.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _require_token(self) -> str:
        if not self.api_token:
            raise MissingCredentialError("EODHD_API_TOKEN is not configured", self.name)
        return self.api_token

    async def _get_json(self, path: str, params: dict[str, str], failure: str) -> Any:
        token = self._require_token()
        url = f"{self.api_base}{path}"
        try:
            response = await self._client.get(url, params={"api_token": token, "fmt": "json", **params})
        except httpx.HTTPError as e:
            raise UpstreamError(f"{failure}: {type(e).__name__}", self.name) from e
        if not response.is_success:
            raise UpstreamError(
                f"{failure}: {response.status_code} {response.reason_phrase}",
                self.name,
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"{failure}: invalid JSON payload", self.name) from e

    async def fetch_bulk_snapshot(self, exchange: str, date: str) -> Any:
        return await self._observed(
            "bulk_snapshot",
            lambda: self._get_json(
                f"/eod-bulk-last-day/{_path_segment(exchange)}",
                {"date": date},
                "Failed to fetch bulk last day data",
            ),
            exchange=exchange,
            date=date,
        )

    async def fetch_history(
        self,
        symbol: str,
        from_date: str | None,
        to_date: str | None,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> Any:
        ticker, exchange = split_symbol(symbol)
        path = f"/eod/{_path_segment(f'{ticker}.{exchange}')}"
        params = {"order": SortOrder(order).value}
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date
        return await self._observed(
            "history",
            lambda: self._get_json(path, params, "Failed to fetch historical data"),
            symbol=symbol,
        )
