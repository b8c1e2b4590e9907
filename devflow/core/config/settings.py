"""
Runtime configuration — the ambient process state, made explicit.

Services never read ``os.getcwd()``, ``sys.platform`` or environment
variables themselves.  The CLI builds one ``RuntimeConfig`` at startup
and passes it down; tests construct it directly.

Environment overrides:
    DEVFLOW_REPO_URL       template repository to clone
    DEVFLOW_MANIFEST_URL   raw URL of the remote web/package.json
    DEVFLOW_HOME           directory holding the IDE ``web/`` subtree
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

REPO_URL = "https://github.com/evolve-labs-cloud/devflow.git"
REMOTE_MANIFEST_URL = (
    "https://raw.githubusercontent.com/evolve-labs-cloud/devflow/main/web/package.json"
)
RELEASE_FILES: tuple[Path, ...] = (Path("/etc/os-release"), Path("/etc/redhat-release"))


def _package_dir() -> Path:
    """Directory of the installed ``devflow`` package."""
    return Path(__file__).resolve().parent.parent.parent


class RuntimeConfig(BaseModel):
    """Everything a service needs to know about the invoking process."""

    cwd: Path
    platform: str = sys.platform
    package_root: Path = Field(default_factory=_package_dir)
    repo_url: str = REPO_URL
    manifest_url: str = REMOTE_MANIFEST_URL
    release_files: tuple[Path, ...] = RELEASE_FILES

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> RuntimeConfig:
        """Build the config from the current process.

        Args:
            environ: Environment mapping (default: ``os.environ``).
            cwd: Working directory (default: ``Path.cwd()``).
        """
        env = os.environ if environ is None else environ
        config = cls(cwd=(cwd or Path.cwd()).resolve())

        updates: dict[str, object] = {}
        if env.get("DEVFLOW_REPO_URL"):
            updates["repo_url"] = env["DEVFLOW_REPO_URL"]
        if env.get("DEVFLOW_MANIFEST_URL"):
            updates["manifest_url"] = env["DEVFLOW_MANIFEST_URL"]
        if env.get("DEVFLOW_HOME"):
            updates["package_root"] = Path(env["DEVFLOW_HOME"]).expanduser().resolve()

        if updates:
            logger.debug("Config overrides from environment: %s", sorted(updates))
            config = config.model_copy(update=updates)
        return config

    @property
    def web_path(self) -> Path:
        """Location of the IDE web subtree."""
        return self.package_root / "web"
