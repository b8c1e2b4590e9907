"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest
from fakes import TEMPLATE_GITIGNORE, TEMPLATE_WEB_VERSION, FakeGit, RecordingReporter

from devflow.core.config.settings import RuntimeConfig


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """A local stand-in for the DevFlow template repository."""
    root = tmp_path / "template"
    agents = root / ".claude" / "commands" / "agents"
    agents.mkdir(parents=True)
    (agents / "architect.md").write_text("# Architect\n")
    (agents / "strategist.md").write_text("# Strategist\n")

    (root / ".devflow").mkdir()
    (root / ".devflow" / "project.yaml").write_text("name: devflow-template\n")

    (root / "docs" / "planning").mkdir(parents=True)
    (root / "docs" / "README.md").write_text("# Docs\n")
    (root / "docs" / "planning" / "roadmap.md").write_text("# Roadmap\n")

    (root / ".gitignore").write_text(TEMPLATE_GITIGNORE)

    (root / "web" / "src").mkdir(parents=True)
    (root / "web" / "package.json").write_text(
        json.dumps({"name": "devflow-web", "version": TEMPLATE_WEB_VERSION})
    )
    (root / "web" / "src" / "app.js").write_text("console.log('devflow')\n")
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty directory the user runs ``devflow`` from."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path: Path, project_dir: Path) -> RuntimeConfig:
    """Runtime config confined to ``tmp_path`` (generic Linux host)."""
    return RuntimeConfig(
        cwd=project_dir,
        platform="linux",
        package_root=tmp_path / "devflow-home",
        repo_url="https://example.invalid/devflow.git",
        manifest_url="https://example.invalid/web/package.json",
        release_files=(tmp_path / "os-release",),
    )


@pytest.fixture
def fake_git(template_repo: Path) -> FakeGit:
    return FakeGit(template_repo)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
