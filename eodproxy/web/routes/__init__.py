"""API routes."""

from eodproxy.web.routes.eod_routes import router as eod_router
from eodproxy.web.routes.health_routes import router as health_router

__all__ = ["eod_router", "health_router"]
