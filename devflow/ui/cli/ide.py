"""
CLI commands for the DevFlow web IDE.

Thin wrappers over ``devflow.core.services.ide``.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from devflow.core.errors import error_message, is_tool_missing


def _handle_ide_error(ctx: click.Context, error: Exception) -> NoReturn:
    reporter = ctx.obj["reporter"]
    if is_tool_missing(error, "git"):
        reporter.error("Git is not installed or not found in PATH.")
    else:
        reporter.error(f"Error starting IDE: {error_message(error)}")
    sys.exit(1)


@click.group()
def ide() -> None:
    """DevFlow IDE — install, update and run the web IDE."""


@ide.command()
@click.pass_context
def start(ctx: click.Context) -> None:
    """Start the DevFlow IDE (installs it on first run)."""
    from devflow.core.services.ide import start_ide

    try:
        start_ide(
            config=ctx.obj["config"],
            git=ctx.obj["git"],
            runner=ctx.obj["runner"],
            manifest=ctx.obj["manifest"],
            reporter=ctx.obj["reporter"],
        )
    except Exception as e:
        _handle_ide_error(ctx, e)


@ide.command()
@click.pass_context
def update(ctx: click.Context) -> None:
    """Update the DevFlow IDE to the latest version."""
    from devflow.core.services.ide import update_ide

    try:
        update_ide(
            config=ctx.obj["config"],
            git=ctx.obj["git"],
            manifest=ctx.obj["manifest"],
            reporter=ctx.obj["reporter"],
        )
    except Exception as e:
        _handle_ide_error(ctx, e)
