"""
End-of-day data routes
Bulk snapshot across exchanges and multi-symbol history.
"""

from fastapi import APIRouter, Request

from eodproxy.core.logging import log_context
from eodproxy.core.services import BulkSnapshotService, HistoryService
from eodproxy.web.models import BulkSnapshotResponse, ErrorResponse, HistoryResponse, SymbolRows
from eodproxy.web.utils import get_request_id, read_json_object

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid request body"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    500: {"model": ErrorResponse, "description": "Upstream or configuration failure"},
}


@router.post("/bulk-snapshot", response_model=BulkSnapshotResponse, responses=_ERRORS)
async def bulk_snapshot(request: Request) -> BulkSnapshotResponse:
    """
    Combined end-of-day quotes for SHG and SHE on one trade date

    Body: `{"trade_date": "YYYYMMDD"}`
    """
    payload = await read_json_object(request)
    service: BulkSnapshotService = request.app.state.bulk_snapshot_service

    with log_context(trace_id=get_request_id(request), route="bulk_snapshot"):
        snapshot = await service.snapshot(payload.get("trade_date"))

    return BulkSnapshotResponse(count=snapshot.count, items=snapshot.items)


@router.post("/history", response_model=HistoryResponse, responses=_ERRORS)
async def history(request: Request) -> HistoryResponse:
    """
    Daily bars for each symbol between two dates, ascending

    Body: `{"symbols": ["600519.SHG"], "start_date": "YYYYMMDD", "end_date": "YYYYMMDD"}`
    """
    payload = await read_json_object(request)
    service: HistoryService = request.app.state.history_service

    with log_context(trace_id=get_request_id(request), route="history"):
        results = await service.history(
            payload.get("symbols"),
            payload.get("start_date"),
            payload.get("end_date"),
        )

    return HistoryResponse(data=[SymbolRows(**result.to_dict()) for result in results])
