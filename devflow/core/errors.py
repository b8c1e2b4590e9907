"""
Error taxonomy — exceptions raised by adapters and services.

Fatal errors propagate up to the CLI, which maps them to a message and
exit code.  Best-effort steps never raise; they return an ``Outcome``.
"""

from __future__ import annotations

import errno
import os


class DevflowError(Exception):
    """Base class for all DevFlow errors."""


class GitCloneError(DevflowError):
    """Raised when ``git clone`` exits non-zero (network, bad URL, auth)."""


class CommandFailedError(DevflowError):
    """Raised when a foreground child process exits non-zero."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"Command failed with exit code {returncode}: {command}")
        self.command = command
        self.returncode = returncode


def is_tool_missing(error: BaseException, tool: str) -> bool:
    """Whether ``error`` means the executable ``tool`` could not be found.

    ``subprocess`` raises ``FileNotFoundError`` (ENOENT) whose filename is
    the executable it tried to launch.  A missing ``.gitignore`` must not
    be mistaken for a missing ``git``, so only the basename is compared.
    """
    if not isinstance(error, OSError) or error.errno != errno.ENOENT:
        return False
    if error.filename is None:
        return f"'{tool}'" in str(error)
    return os.path.basename(str(error.filename)) in (tool, f"{tool}.exe")


def error_message(error: BaseException) -> str:
    """Human-readable message text for an arbitrary exception."""
    return str(error) or error.__class__.__name__


def tool_missing(tool: str) -> FileNotFoundError:
    """The error ``subprocess`` would raise for a missing ``tool``."""
    return FileNotFoundError(errno.ENOENT, f"{tool} executable not found", tool)
