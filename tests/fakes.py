"""
Test doubles for every DevFlow collaborator.

Nothing here touches the network, real git, or anything outside the
directories a test hands in.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from devflow.adapters.base import ManifestSource, ProcessRunner, Prober, VersionControl
from devflow.core.errors import CommandFailedError
from devflow.core.models.capability import ToolProbe
from devflow.core.observability.reporter import Reporter

TEMPLATE_GITIGNORE = "# DevFlow\n.devflow/sessions/\nnode_modules/\n"
TEMPLATE_WEB_VERSION = "1.2.0"

# Version output of a fully equipped host, keyed by command
ALL_TOOLS: dict[str, str | None] = {
    "git": "git version 2.43.0",
    "claude": "1.0.17 (Claude Code)",
    "node": "v20.11.1",
    "python3": "Python 3.12.1",
    "gcc": "gcc (GCC) 13.2.1",
    "make": "GNU Make 4.4.1",
}


class FakeGit(VersionControl):
    """Clone by copying a local template tree.

    With ``error`` set, the clone raises it instead; if a template is
    also given, the tree is copied first so a half-finished clone is
    left behind for cleanup.
    """

    def __init__(
        self,
        template: Path | None = None,
        error: BaseException | None = None,
        available: bool = True,
    ):
        self._template = template
        self._error = error
        self._available = available
        self.clones: list[tuple[str, Path]] = []

    @property
    def name(self) -> str:
        return "fake-git"

    def is_available(self) -> bool:
        return self._available

    def clone(self, url: str, destination: Path) -> None:
        self.clones.append((url, destination))
        if self._template is not None:
            shutil.copytree(self._template, destination)
        if self._error is not None:
            raise self._error


class FakeProber(Prober):
    """Scripted prober: ``tools`` maps a command to its version output.

    A command absent from ``tools`` is not found; one mapped to None is
    found but its version cannot be read.
    """

    def __init__(self, tools: dict[str, str | None] | None = None):
        self._tools = dict(tools or {})
        self.call_log: list[str] = []

    @property
    def name(self) -> str:
        return "fake-prober"

    def probe(self, command: str, version_flag: str = "--version") -> ToolProbe:
        self.call_log.append(command)
        if command not in self._tools:
            return ToolProbe(found=False)
        return ToolProbe(found=True, version=self._tools[command])


class FakeRunner(ProcessRunner):
    """Records commands; fails the ones listed in ``fail``."""

    def __init__(self, fail: tuple[str, ...] = (), returncode: int = 1):
        self._fail = fail
        self._returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def name(self) -> str:
        return "fake-runner"

    def run(self, args: list[str], cwd: Path) -> None:
        self.calls.append((list(args), cwd))
        command = " ".join(args)
        if command in self._fail:
            raise CommandFailedError(command, self._returncode)


class FakeManifest(ManifestSource):
    """Serves a fixed remote version (None = unreachable)."""

    def __init__(self, version: str | None = None):
        self._version = version
        self.urls: list[str] = []

    @property
    def name(self) -> str:
        return "fake-manifest"

    def fetch_version(self, url: str) -> str | None:
        self.urls.append(url)
        return self._version


class RecordingReporter(Reporter):
    """Keeps every status line as ``(level, message)``."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.lines.append(("info", message))

    def success(self, message: str) -> None:
        self.lines.append(("success", message))

    def warn(self, message: str) -> None:
        self.lines.append(("warn", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.lines if lvl == level]


class ScriptedPrompt:
    """Answers prompts from a list and remembers the questions."""

    def __init__(self, *answers: str):
        self._answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {question!r}")
        return self._answers.pop(0)


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Relative path → file bytes (None for directories)."""
    tree: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        tree[rel] = path.read_bytes() if path.is_file() else None
    return tree
