"""
Adapter base — the contracts between services and external tools.

Services only talk to the outside world (executables, git, the network)
through these interfaces.  Real implementations live next to this module;
tests substitute fakes that touch nothing outside ``tmp_path``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from devflow.core.models.capability import ToolProbe


class Adapter(ABC):
    """Abstract base class for all adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'git', 'http')."""

    def is_available(self) -> bool:
        """Check if this adapter's underlying tool is available.

        Should be fast and never raise.
        """
        return True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class Prober(Adapter):
    """Looks up executables and reads their version string."""

    @abstractmethod
    def probe(self, command: str, version_flag: str = "--version") -> ToolProbe:
        """Check whether ``command`` is on the search path.

        When it is, run ``command version_flag`` and keep its output.
        MUST never raise: an unreadable version is ``version=None``.
        """


class VersionControl(Adapter):
    """Fetches a template repository."""

    @abstractmethod
    def clone(self, url: str, destination: Path) -> None:
        """Clone ``url`` into ``destination``.

        Raises:
            FileNotFoundError: the VCS executable is not installed.
            GitCloneError: the clone itself failed.
        """


class ProcessRunner(Adapter):
    """Runs a child process in the foreground."""

    @abstractmethod
    def run(self, args: list[str], cwd: Path) -> None:
        """Run ``args`` in ``cwd`` with inherited stdio until it exits.

        Raises:
            CommandFailedError: the process exited non-zero.
        """


class ManifestSource(Adapter):
    """Reads the version declared by a remote manifest."""

    @abstractmethod
    def fetch_version(self, url: str) -> str | None:
        """Return the ``version`` field of the JSON document at ``url``.

        MUST never raise: any failure resolves to None ("unknown").
        """
