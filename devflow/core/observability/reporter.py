"""
Reporter — the contract between services and whatever renders progress.

Services describe what happened ("agents installed", "cloning…"); the
reporter decides how it looks.  The CLI plugs in a click-based
implementation with a spinner; library callers get ``LogReporter``,
which routes everything to ``logging``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from devflow.core.models.outcome import Outcome

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """Abstract sink for user-facing status lines."""

    @abstractmethod
    def info(self, message: str) -> None: ...

    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def warn(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Show ``message`` while the body runs; always stops on exit.

        The default implementation just announces the message.
        """
        self.info(message)
        yield

    def outcome(self, outcome: Outcome) -> None:
        """Render a step outcome at the level matching its status."""
        if outcome.status == "ok":
            self.success(outcome.message)
        elif outcome.status == "warning":
            self.warn(outcome.message)
        elif outcome.status == "skipped" and outcome.message:
            self.warn(outcome.message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class LogReporter(Reporter):
    """Reporter that writes every line to the ``devflow`` logger."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def info(self, message: str) -> None:
        self._log.info(message)

    def success(self, message: str) -> None:
        self._log.info(message)

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def error(self, message: str) -> None:
        self._log.error(message)
