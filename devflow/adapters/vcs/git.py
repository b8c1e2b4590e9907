"""
Git adapter — fetch the template repository.

Uses the git CLI, never raw API calls.  A missing ``git`` surfaces as the
``FileNotFoundError`` raised by ``subprocess`` so callers can tell
"git is not installed" apart from "the clone failed".
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from devflow.adapters.base import VersionControl
from devflow.core.errors import GitCloneError

logger = logging.getLogger(__name__)


class GitAdapter(VersionControl):
    """Clone repositories with the ``git`` executable."""

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def clone(self, url: str, destination: Path) -> None:
        logger.info("Cloning %s into %s", url, destination)
        result = self._git(["clone", url, str(destination)])
        if result.returncode != 0:
            detail = result.stderr.strip() or f"git clone exited with code {result.returncode}"
            raise GitCloneError(detail)

    # ── Helpers ─────────────────────────────────────────────────

    def _git(self, args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        """Run a git command and return the result."""
        return subprocess.run(
            ["git", *args],
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
        )
