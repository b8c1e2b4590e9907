"""
Shell adapters — probe executables and run foreground processes.

``ShellProber`` is the read-only half: ``shutil.which`` plus a
``--version`` call.  ``ShellRunner`` launches long-running commands
(``npm install``, ``npm run dev``) with the terminal attached.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from devflow.adapters.base import ProcessRunner, Prober
from devflow.core.errors import CommandFailedError
from devflow.core.models.capability import ToolProbe

logger = logging.getLogger(__name__)


class ShellProber(Prober):
    """Probe executables on ``PATH``."""

    def __init__(self, timeout: int = 10):
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "shell"

    def probe(self, command: str, version_flag: str = "--version") -> ToolProbe:
        path = shutil.which(command)
        if path is None:
            logger.debug("Probe %s: not on PATH", command)
            return ToolProbe(found=False)

        try:
            result = subprocess.run(
                [path, version_flag],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("Probe %s: version call failed: %s", command, e)
            return ToolProbe(found=True)

        if result.returncode != 0:
            logger.debug("Probe %s: %s exited %d", command, version_flag, result.returncode)
            return ToolProbe(found=True)

        # Some tools print their version to stderr
        output = ((result.stdout or "") + (result.stderr or "")).strip()
        logger.debug("Probe %s: %s", command, output.splitlines()[0] if output else "<empty>")
        return ToolProbe(found=True, version=output or None)


class ShellRunner(ProcessRunner):
    """Run a command in the foreground, stdio inherited."""

    @property
    def name(self) -> str:
        return "process"

    def run(self, args: list[str], cwd: Path) -> None:
        # npm is npm.cmd on Windows; which() resolves the real launcher
        executable = shutil.which(args[0]) or args[0]
        command = " ".join(args)
        logger.debug("Running: %s (cwd=%s)", command, cwd)

        result = subprocess.run([executable, *args[1:]], cwd=str(cwd))
        if result.returncode != 0:
            raise CommandFailedError(command, result.returncode)
