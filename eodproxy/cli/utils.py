"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from eodproxy.core.config import ProxyConfig, load_config

VALIDATION_EXIT_CODE = 2
PROVIDER_EXIT_CODE = 3
SYSTEM_EXIT_CODE = 1


def get_config(ctx: typer.Context) -> ProxyConfig:
    """Return the configuration loaded by the root callback."""

    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    if config is None:
        config_path: Path | None = ctx.obj.get("config_path")
        config = load_config(config_path)
        ctx.obj["config"] = config
    return config


def emit_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def emit_error(message: str) -> None:
    """Print the failure envelope to stderr."""

    typer.echo(json.dumps({"ok": False, "error": message}, ensure_ascii=False), err=True)
