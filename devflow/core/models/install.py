"""
Install models — the static install plan and the results of an install.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from devflow.core.models.outcome import Outcome

# ── Install plan (static, not user-configurable) ────────────────

AGENTS_DIR = ".claude/commands/agents"
DEVFLOW_DIR = ".devflow"
DEVFLOW_SUBDIRS = ("agents", "memory", "sessions")
PROJECT_FILE = "project.yaml"
DOCS_DIR = "docs"
SNAPSHOTS_DIR = "snapshots"
GITIGNORE = ".gitignore"

INSTALL_PLAN: tuple[str, ...] = (AGENTS_DIR, DEVFLOW_DIR, DOCS_DIR, GITIGNORE)

# .gitignore is merged, never replaced, so it cannot conflict.
CONFLICT_PATHS: tuple[str, ...] = tuple(p for p in INSTALL_PLAN if p != GITIGNORE)

WEB_DIR = "web"
WEB_MANIFEST = "package.json"


class InitResult(BaseModel):
    """What ``initialize_project`` did to the target."""

    target: Path
    folder: str | None = None
    cancelled: bool = False
    conflicts: list[str] = Field(default_factory=list)
    steps: list[Outcome] = Field(default_factory=list)
    cleanup: Outcome | None = None

    @property
    def warnings(self) -> list[Outcome]:
        return [s for s in self.steps if s.status == "warning"]


class VersionCheck(BaseModel):
    """Local vs remote version of the IDE web subtree."""

    local_version: str | None = None
    remote_version: str | None = None
    has_update: bool = False


class IdeUpdateResult(BaseModel):
    """What ``update_ide`` did."""

    updated: bool = False
    check: VersionCheck | None = None
