"""
FastAPI application factory
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException

from eodproxy import __version__
from eodproxy.core.config import ProxyConfig, load_config
from eodproxy.core.data.providers import EodDataSource, create_data_source
from eodproxy.core.exceptions import EodProxyError
from eodproxy.core.services import BulkSnapshotService, HistoryService
from eodproxy.web.auth import HEALTH_PATH, BearerAuthMiddleware
from eodproxy.web.metrics import router as metrics_router
from eodproxy.web.models import ErrorResponse
from eodproxy.web.routes import eod_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release the data source on shutdown."""
    config: ProxyConfig = app.state.config
    logger.info("eodproxy started", mode=config.data_source_mode, version=__version__)

    yield

    await app.state.data_source.aclose()
    logger.info("eodproxy stopped")


def create_app(config: ProxyConfig | None = None, data_source: EodDataSource | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Process configuration; loaded from the environment when omitted.
        data_source: Overrides the source selected from ``config``.
    """
    config = config or load_config()
    source = data_source or create_data_source(config)

    app = FastAPI(
        title="eodproxy",
        description="Bearer-token protected proxy for EODHD end-of-day data",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.data_source = source
    app.state.bulk_snapshot_service = BulkSnapshotService(source)
    app.state.history_service = HistoryService(source)

    _setup_middleware(app, config)
    _setup_routes(app)
    _setup_exception_handlers(app)

    return app


def _setup_middleware(app: FastAPI, config: ProxyConfig) -> None:
    # added last so it runs first
    app.add_middleware(BearerAuthMiddleware, expected_token=config.bearer_token, exempt_path=HEALTH_PATH)


def _setup_routes(app: FastAPI) -> None:
    app.include_router(eod_router, prefix="/api/eod", tags=["eod"])
    app.include_router(health_router, prefix="/api", tags=["health"])
    app.include_router(metrics_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _setup_exception_handlers(app: FastAPI) -> None:
    """Map exceptions to the failure envelope."""

    @app.exception_handler(EodProxyError)
    async def eodproxy_exception_handler(request: Request, exc: EodProxyError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.bind(error_code=exc.error_code).error("Request failed: {}", exc.message, path=request.url.path)
        else:
            logger.bind(error_code=exc.error_code).info("Rejected request: {}", exc.message, path=request.url.path)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error("Unhandled error", path=request.url.path)
        return _error(500, "Internal server error")
