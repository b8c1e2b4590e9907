"""
Terminal output — click-based Reporter with a braille spinner.

The spinner animates only on an interactive stdout; under pipes and
``CliRunner`` it prints nothing, so captured output stays clean.
"""

from __future__ import annotations

import itertools
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

import click

from devflow.core.observability.reporter import Reporter

_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
_INTERVAL = 0.1


class ClickReporter(Reporter):
    """Render status lines with click."""

    def __init__(self, interactive: bool | None = None):
        self._interactive = sys.stdout.isatty() if interactive is None else interactive

    def info(self, message: str) -> None:
        click.echo(f"ℹ {message}")

    def success(self, message: str) -> None:
        click.secho(f"✓ {message}", fg="green")

    def warn(self, message: str) -> None:
        click.secho(f"⚠ {message}", fg="yellow")

    def error(self, message: str) -> None:
        click.secho(f"✗ {message}", fg="red", err=True)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        if not self._interactive:
            yield
            return

        stop = threading.Event()

        def spin() -> None:
            for frame in itertools.cycle(_FRAMES):
                click.echo(f"\r{frame} {message}", nl=False)
                if stop.wait(_INTERVAL):
                    break

        thread = threading.Thread(target=spin, daemon=True)
        thread.start()
        try:
            yield
        finally:
            stop.set()
            thread.join()
            # Clear the spinner line
            click.echo("\r\033[K", nl=False)


def ask(question: str) -> str:
    """Prompt for a free-form answer; an empty answer is allowed."""
    return click.prompt(question, default="", show_default=False, prompt_suffix="")
