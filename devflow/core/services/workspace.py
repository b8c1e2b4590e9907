"""
Temp workspace — a uniquely named scratch directory with guaranteed cleanup.

Used as a context manager around clone-and-copy sequences.  The
directory is removed on every exit path (success, cancellation,
exception); a failed removal is logged and recorded, never raised.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from devflow.core.models.outcome import Outcome

logger = logging.getLogger(__name__)


class TempWorkspace:
    """``<parent>/<prefix>-<epoch ms>``, removed when the block exits."""

    def __init__(
        self,
        parent: Path,
        prefix: str,
        clock: Callable[[], float] = time.time,
    ):
        self.path = parent / f"{prefix}-{int(clock() * 1000)}"
        self.cleanup: Outcome | None = None

    def __enter__(self) -> TempWorkspace:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup = self.remove()

    def remove(self) -> Outcome:
        """Delete the workspace; never raises."""
        if not self.path.exists():
            return Outcome.skip("cleanup", "Nothing to clean up")
        try:
            shutil.rmtree(self.path)
        except OSError as e:
            logger.warning("Could not remove %s: %s", self.path, e)
            return Outcome.ignored("cleanup", f"Could not remove {self.path.name}", error=str(e))
        logger.debug("Removed workspace %s", self.path)
        return Outcome.success("cleanup", "Temporary files cleaned up")
