"""
Template installer — put DevFlow into a project directory.

Sequence (linear):
    1. resolve + create the target directory
    2. clone the template repository into a temp workspace inside it
    3. conflict gate (ask before replacing existing DevFlow folders)
    4. copy agents / .devflow structure / docs   (each step best-effort)
    5. merge .gitignore
    6. remove the temp workspace                 (always, never raises)

Fatal errors (clone failure, missing git, unwritable target) propagate
to the caller after cleanup has been attempted.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from devflow.adapters.base import VersionControl
from devflow.adapters.vcs.git import GitAdapter
from devflow.core.config.settings import RuntimeConfig
from devflow.core.errors import tool_missing
from devflow.core.models.install import (
    AGENTS_DIR,
    DEVFLOW_DIR,
    DEVFLOW_SUBDIRS,
    DOCS_DIR,
    GITIGNORE,
    PROJECT_FILE,
    SNAPSHOTS_DIR,
    InitResult,
)
from devflow.core.models.outcome import Outcome
from devflow.core.observability.reporter import LogReporter, Reporter
from devflow.core.services.conflicts import find_conflicts, resolve_conflicts
from devflow.core.services.sync import copy_tree
from devflow.core.services.workspace import TempWorkspace

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".devflow-temp"


def resolve_target(config: RuntimeConfig, folder: str | None = None) -> Path:
    """Absolute install target: ``folder`` relative to the cwd, or the cwd."""
    if not folder:
        return config.cwd
    return (config.cwd / folder).resolve()


def initialize_project(
    folder: str | None = None,
    *,
    config: RuntimeConfig,
    prompt: Callable[[str], str],
    git: VersionControl | None = None,
    reporter: Reporter | None = None,
) -> InitResult:
    """Install DevFlow into ``folder`` (default: the working directory).

    Args:
        folder: Target folder as typed by the user, or None.
        config: Runtime configuration (cwd, template URL).
        prompt: Asks the user a question and returns the raw answer.
        git: Template fetcher (default: ``GitAdapter``).
        reporter: Status line sink (default: ``LogReporter``).

    Returns:
        InitResult; ``cancelled`` is True when the user declined to
        replace existing files, in which case nothing was copied.
    """
    git = git or GitAdapter()
    reporter = reporter or LogReporter()

    # Before any write to the target
    if not git.is_available():
        raise tool_missing("git")

    target = resolve_target(config, folder)
    target.mkdir(parents=True, exist_ok=True)
    result = InitResult(target=target, folder=folder)

    with TempWorkspace(target, TEMP_PREFIX) as workspace:
        with reporter.spinner("Cloning template repository..."):
            git.clone(config.repo_url, workspace.path)
        reporter.success("Cloned template repository")

        result.conflicts = find_conflicts(target)
        if resolve_conflicts(result.conflicts, prompt=prompt, reporter=reporter):
            with reporter.spinner("Installing DevFlow files..."):
                result.steps = install_files(workspace.path, target)
            result.steps.append(merge_gitignore(workspace.path, target))
            for step in result.steps:
                reporter.outcome(step)
        else:
            logger.info("Install into %s declined at conflict prompt", target)
            result.cancelled = True

    result.cleanup = workspace.cleanup
    if result.cleanup is not None and result.cleanup.status != "ignored":
        reporter.success("Temporary files cleaned up")

    if not result.cancelled:
        reporter.success(f"DevFlow initialized{f' in {folder}' if folder else ''} 🚀")
    return result


# ── Selective install (independent, best-effort) ────────────────


def install_files(template: Path, target: Path) -> list[Outcome]:
    """Run the three copy steps; one failing does not stop the others."""
    return [
        install_agents(template, target),
        install_devflow_structure(template, target),
        install_docs(template, target),
    ]


def install_agents(template: Path, target: Path) -> Outcome:
    """Replace ``.claude/commands/agents`` with the template's copy."""
    source = template / AGENTS_DIR
    destination = target / AGENTS_DIR
    try:
        if not source.is_dir():
            raise FileNotFoundError(f"Template has no {AGENTS_DIR}")
        if destination.exists():
            shutil.rmtree(destination)
        destination.mkdir(parents=True)
        copy_tree(source, destination)
    except OSError as e:
        logger.warning("Agents install failed: %s", e)
        return Outcome.warning("agents", f"Could not copy {AGENTS_DIR}", error=str(e))
    return Outcome.success("agents", f"Agents installed ({AGENTS_DIR}/)")


def install_devflow_structure(template: Path, target: Path) -> Outcome:
    """Create ``.devflow/{agents,memory,sessions}`` and ``project.yaml``."""
    devflow = target / DEVFLOW_DIR
    try:
        for sub in DEVFLOW_SUBDIRS:
            (devflow / sub).mkdir(parents=True, exist_ok=True)

        project_source = template / DEVFLOW_DIR / PROJECT_FILE
        project_target = devflow / PROJECT_FILE
        if project_source.is_file():
            shutil.copyfile(project_source, project_target)
        else:
            project_target.write_text("", encoding="utf-8")
    except OSError as e:
        logger.warning("DevFlow structure failed: %s", e)
        return Outcome.warning("devflow", f"Could not copy {DEVFLOW_DIR} structure", error=str(e))
    return Outcome.success("devflow", f"DevFlow structure created ({DEVFLOW_DIR}/)")


def install_docs(template: Path, target: Path) -> Outcome:
    """Copy ``docs/`` unless the project already has one."""
    docs = target / DOCS_DIR
    if docs.exists():
        outcome = Outcome.skip("docs", f"{DOCS_DIR}/ folder already exists - keeping existing")
    else:
        try:
            source = template / DOCS_DIR
            if not source.is_dir():
                raise FileNotFoundError(f"Template has no {DOCS_DIR}")
            if docs.is_symlink():
                docs.unlink()
            docs.mkdir(parents=True)
            copy_tree(source, docs)
            outcome = Outcome.success("docs", f"Documentation structure created ({DOCS_DIR}/)")
        except OSError as e:
            logger.warning("Docs install failed: %s", e)
            outcome = Outcome.warning("docs", f"Could not copy {DOCS_DIR}/ folder", error=str(e))

    try:
        (docs / SNAPSHOTS_DIR).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create %s/%s: %s", DOCS_DIR, SNAPSHOTS_DIR, e)
        if outcome.status != "warning":
            outcome = Outcome.warning("docs", f"Could not create {DOCS_DIR}/{SNAPSHOTS_DIR}", error=str(e))
    return outcome


# ── Config merge ────────────────────────────────────────────────


def merge_gitignore(template: Path, target: Path) -> Outcome:
    """Copy the template ``.gitignore`` or append it to the existing one.

    The append is unconditional: entries already present are repeated.
    """
    source = template / GITIGNORE
    destination = target / GITIGNORE

    if not source.is_file():
        return Outcome.skip("gitignore")

    if not destination.exists():
        shutil.copyfile(source, destination)
        return Outcome.success("gitignore", f"{GITIGNORE} created")

    existing = destination.read_bytes()
    addition = source.read_bytes()
    destination.write_bytes(existing + b"\n" + addition)
    return Outcome.success("gitignore", f"{GITIGNORE} updated (merged with DevFlow entries)")
