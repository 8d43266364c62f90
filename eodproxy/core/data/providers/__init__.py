"""Data-source implementations."""

from eodproxy.core.data.providers.base import EodDataSource, Record, SortOrder
from eodproxy.core.data.providers.factory import create_data_source
from eodproxy.core.data.providers.live import LiveSource
from eodproxy.core.data.providers.simulated import SimulatedSource

__all__ = [
    "EodDataSource",
    "LiveSource",
    "Record",
    "SimulatedSource",
    "SortOrder",
    "create_data_source",
]
