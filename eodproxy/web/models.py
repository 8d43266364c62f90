"""
Web API models
Request and response envelopes for the proxy endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Failure envelope shared by every endpoint."""

    ok: bool = Field(False, description="Always false for failures")
    error: str = Field(..., description="Human readable error message")


class BulkSnapshotResponse(BaseModel):
    """Combined bulk snapshot across exchanges."""

    ok: bool = Field(True)
    count: int = Field(..., ge=0, description="Number of items")
    items: list[Any] = Field(default_factory=list, description="Upstream quote records, unmodified")


class SymbolRows(BaseModel):
    symbol: str
    rows: Any = Field(default_factory=list, description="Upstream bar records, unmodified")


class HistoryResponse(BaseModel):
    """Per-symbol history in request order."""

    ok: bool = Field(True)
    data: list[SymbolRows] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = Field(True)
    ts: int = Field(..., description="Server time in epoch milliseconds")
