"""Request-level aggregation services."""

from eodproxy.core.services.bulk_snapshot import DEFAULT_EXCHANGES, BulkSnapshot, BulkSnapshotService
from eodproxy.core.services.history import HistoryService, SymbolHistory

__all__ = [
    "DEFAULT_EXCHANGES",
    "BulkSnapshot",
    "BulkSnapshotService",
    "HistoryService",
    "SymbolHistory",
]
