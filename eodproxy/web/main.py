"""
Web service launcher
"""

import uvicorn
from fastapi import FastAPI

from eodproxy.core.config import ProxyConfig, load_config
from eodproxy.core.logging import configure_logging
from eodproxy.web.app import create_app


def serve(config: ProxyConfig | None = None, reload: bool = False) -> None:
    """Run the API under uvicorn."""

    config = config or load_config()
    configure_logging(level=config.log_level)
    if reload:
        # reload needs an import string; the worker rebuilds config from the environment
        uvicorn.run(
            "eodproxy.web.main:create_default_app",
            factory=True,
            host=config.host,
            port=config.port,
            reload=True,
            log_level=config.log_level.lower(),
        )
        return
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


def create_default_app() -> FastAPI:
    return create_app()


if __name__ == "__main__":
    serve()
