"""
Capability models — what the dependency probe found on this host.

A ``CapabilityReport`` is computed fresh on every ``init`` / ``deps`` run
and discarded afterwards.  ``has_errors`` is derived from the missing
lists so it can never disagree with them.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, computed_field


class ToolId(str, Enum):
    """External tools DevFlow depends on."""

    GIT = "git"
    CLAUDE = "claude-code"
    NODE = "nodejs"
    PYTHON = "python3"
    GCC = "gcc"
    MAKE = "make"


# git and the Claude Code CLI are needed for agents; the rest only for the IDE.
REQUIRED_TOOLS: frozenset[ToolId] = frozenset({ToolId.GIT, ToolId.CLAUDE})


OSId = Literal["macos", "windows", "ubuntu", "fedora", "rhel", "arch", "linux", "unknown"]


class OSInfo(BaseModel):
    """Host operating system family."""

    id: OSId = "unknown"
    name: str = "Unknown"


class ToolProbe(BaseModel):
    """Result of looking up one executable.

    ``found`` answers "is it on the search path"; ``version`` is the raw
    output of its version flag, or None when that could not be read.
    """

    found: bool = False
    version: str | None = None

    @property
    def first_line(self) -> str:
        """First line of the version output (empty when unknown)."""
        if not self.version:
            return ""
        return self.version.splitlines()[0].strip()


class Finding(BaseModel):
    """One human-readable probe line."""

    tool: ToolId
    status: Literal["ok", "missing", "outdated"] = "ok"
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def level(self) -> Literal["ok", "warning", "error"]:
        """Severity for rendering; only a missing git is an error."""
        if self.ok:
            return "ok"
        if self.tool is ToolId.GIT:
            return "error"
        return "warning"


class CapabilityReport(BaseModel):
    """Aggregated dependency check for the current host."""

    missing_required: list[ToolId] = Field(default_factory=list)
    missing_optional: list[ToolId] = Field(default_factory=list)
    os_id: OSId = "unknown"
    os_name: str = "Unknown"
    findings: list[Finding] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_errors(self) -> bool:
        return len(self.missing_required) + len(self.missing_optional) > 0

    def add(self, finding: Finding) -> None:
        """Record a finding and, if it is a deficiency, the missing tool."""
        self.findings.append(finding)
        if finding.ok:
            return
        bucket = (
            self.missing_required
            if finding.tool in REQUIRED_TOOLS
            else self.missing_optional
        )
        if finding.tool not in bucket:
            bucket.append(finding.tool)

    def status_of(self, tool: ToolId) -> str | None:
        """Status of the last finding for ``tool`` (None if never probed)."""
        for finding in reversed(self.findings):
            if finding.tool is tool:
                return finding.status
        return None
