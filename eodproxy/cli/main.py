"""Main entry point for the eodproxy command line interface."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import typer

from eodproxy.core.exceptions import ConfigurationError
from eodproxy.core.logging import configure_logging

from .data import register as register_data_commands
from .utils import SYSTEM_EXIT_CODE, emit_error, get_config


def create_app() -> typer.Typer:
    """Create the Typer application."""

    app = typer.Typer(add_completion=False, help="eodproxy command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Path | None = typer.Option(
            None,
            "--config",
            "-c",
            help="TOML configuration file; environment variables take precedence.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Override LOG_LEVEL.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        ctx.obj["config_path"] = config_path
        try:
            config = get_config(ctx)
        except ConfigurationError as exc:
            emit_error(exc.message)
            raise typer.Exit(code=SYSTEM_EXIT_CODE) from exc
        configure_logging(level=(log_level or config.log_level).upper())

    @app.command("serve")
    def serve_command(
        ctx: typer.Context,
        host: str | None = typer.Option(None, "--host", help="Bind address."),
        port: int | None = typer.Option(None, "--port", help="Bind port."),
        reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
    ) -> None:
        """Run the HTTP proxy."""

        from eodproxy.web.main import serve

        config = get_config(ctx)
        config = replace(config, host=host or config.host, port=port or config.port)
        serve(config, reload=reload)

    register_data_commands(app)
    return app


app = create_app()
