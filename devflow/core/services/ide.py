"""
DevFlow IDE — install, update and launch the web IDE.

The IDE is the ``web/`` subtree of the template repository, kept under
``config.package_root``.  ``start_ide`` installs it on first use and only
*warns* about newer versions; ``update_ide`` replaces it when the remote
``package.json`` declares a newer version.
"""

from __future__ import annotations

import json
import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from devflow.adapters.base import ManifestSource, ProcessRunner, VersionControl
from devflow.adapters.http.manifest import RemoteManifest
from devflow.adapters.shell.command import ShellRunner
from devflow.adapters.vcs.git import GitAdapter
from devflow.core.config.settings import RuntimeConfig
from devflow.core.errors import tool_missing
from devflow.core.domain.version import is_newer
from devflow.core.models.install import WEB_DIR, WEB_MANIFEST, IdeUpdateResult, VersionCheck
from devflow.core.observability.reporter import LogReporter, Reporter
from devflow.core.services.sync import copy_tree
from devflow.core.services.workspace import TempWorkspace

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".devflow-ide-temp"
DEPENDENCY_MARKER = "node_modules"


# ── Version check ───────────────────────────────────────────────


def get_local_version(web_path: Path) -> str | None:
    """``version`` from ``web/package.json``, or None if unreadable."""
    try:
        data = json.loads((web_path / WEB_MANIFEST).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("No local IDE version: %s", e)
        return None
    if not isinstance(data, dict):
        return None
    version = data.get("version")
    return version if isinstance(version, str) else None


def check_for_update(
    web_path: Path,
    *,
    config: RuntimeConfig,
    manifest: ManifestSource | None = None,
) -> VersionCheck:
    """Compare the local IDE version with the remote manifest.

    The local read and the remote fetch run concurrently.  An unknown or
    unparseable version on either side means "no update".
    """
    manifest = manifest or RemoteManifest()

    with ThreadPoolExecutor(max_workers=2) as pool:
        local_future = pool.submit(get_local_version, web_path)
        remote_future = pool.submit(manifest.fetch_version, config.manifest_url)
        local_version = local_future.result()
        remote_version = remote_future.result()

    has_update = False
    if local_version is not None and remote_version is not None:
        try:
            has_update = is_newer(remote_version, local_version)
        except ValueError as e:
            logger.debug("Cannot compare IDE versions: %s", e)

    logger.debug("IDE version local=%s remote=%s update=%s", local_version, remote_version, has_update)
    return VersionCheck(
        local_version=local_version,
        remote_version=remote_version,
        has_update=has_update,
    )


# ── Install ─────────────────────────────────────────────────────


def setup_web_folder(
    config: RuntimeConfig,
    *,
    replace: bool = False,
    git: VersionControl,
    reporter: Reporter,
) -> None:
    """Clone the template and install its ``web/`` subtree.

    Args:
        replace: Remove an existing ``web/`` before copying.
    """
    if not git.is_available():
        raise tool_missing("git")

    web_path = config.web_path
    config.package_root.mkdir(parents=True, exist_ok=True)

    with TempWorkspace(config.package_root, TEMP_PREFIX) as workspace:
        with reporter.spinner("Cloning repository..."):
            git.clone(config.repo_url, workspace.path)
        reporter.success("Repository cloned")

        if replace and web_path.exists():
            with reporter.spinner("Removing existing web folder..."):
                shutil.rmtree(web_path)
            reporter.success("Existing web folder removed")

        with reporter.spinner("Setting up web folder..."):
            copy_tree(workspace.path / WEB_DIR, web_path)
        reporter.success(f"Web folder installed at {web_path}")

    if workspace.cleanup is not None and workspace.cleanup.status != "ignored":
        reporter.success("Temporary files cleaned up")


# ── Entry points ────────────────────────────────────────────────


def start_ide(
    *,
    config: RuntimeConfig,
    git: VersionControl | None = None,
    runner: ProcessRunner | None = None,
    manifest: ManifestSource | None = None,
    reporter: Reporter | None = None,
) -> None:
    """Install the IDE if needed, then run its dev server in the foreground.

    Blocks until the dev server exits.

    Raises:
        CommandFailedError: ``npm install`` or the dev server exited non-zero.
    """
    git = git or GitAdapter()
    runner = runner or ShellRunner()
    reporter = reporter or LogReporter()
    web_path = config.web_path

    if not web_path.exists():
        setup_web_folder(config, git=git, reporter=reporter)
    else:
        check = check_for_update(web_path, config=config, manifest=manifest)
        if check.has_update:
            reporter.warn(
                f"New version available: {check.remote_version} (current: {check.local_version})"
            )
            reporter.info("Run 'devflow ide update' to update to the latest version")

    if not (web_path / DEPENDENCY_MARKER).exists():
        reporter.info("Installing dependencies...")
        runner.run(["npm", "install"], web_path)
        reporter.success("Dependencies installed")

    reporter.info("Starting DevFlow IDE...")
    runner.run(["npm", "run", "dev"], web_path)


def update_ide(
    *,
    config: RuntimeConfig,
    git: VersionControl | None = None,
    manifest: ManifestSource | None = None,
    reporter: Reporter | None = None,
) -> IdeUpdateResult:
    """Replace the IDE with the latest template version, if newer.

    An existing install whose version is current, or whose version
    cannot be determined, is left untouched.
    """
    git = git or GitAdapter()
    reporter = reporter or LogReporter()
    web_path = config.web_path

    check: VersionCheck | None = None
    if web_path.exists():
        check = check_for_update(web_path, config=config, manifest=manifest)
        if not check.has_update:
            if check.local_version and check.remote_version:
                reporter.success(f"DevFlow IDE is already up to date (version {check.local_version})")
            else:
                reporter.success("DevFlow IDE is already up to date")
            return IdeUpdateResult(updated=False, check=check)
        reporter.info(f"Updating DevFlow IDE from {check.local_version} to {check.remote_version}...")
    else:
        reporter.info("Installing DevFlow IDE...")

    setup_web_folder(config, replace=True, git=git, reporter=reporter)
    reporter.success("DevFlow IDE updated successfully")
    return IdeUpdateResult(updated=True, check=check)
