"""
Tests for RuntimeConfig — defaults and environment overrides.
"""

from pathlib import Path

from devflow.core.config.settings import REMOTE_MANIFEST_URL, REPO_URL, RuntimeConfig


class TestRuntimeConfig:
    def test_defaults(self, tmp_path: Path):
        config = RuntimeConfig.from_environment({}, cwd=tmp_path)
        assert config.cwd == tmp_path.resolve()
        assert config.repo_url == REPO_URL
        assert config.manifest_url == REMOTE_MANIFEST_URL
        assert (config.package_root / "__init__.py").is_file()

    def test_env_overrides(self, tmp_path: Path):
        env = {
            "DEVFLOW_REPO_URL": "https://git.example.invalid/fork.git",
            "DEVFLOW_MANIFEST_URL": "https://raw.example.invalid/package.json",
            "DEVFLOW_HOME": str(tmp_path / "home"),
        }
        config = RuntimeConfig.from_environment(env, cwd=tmp_path)
        assert config.repo_url == "https://git.example.invalid/fork.git"
        assert config.manifest_url == "https://raw.example.invalid/package.json"
        assert config.package_root == (tmp_path / "home").resolve()
        assert config.web_path == (tmp_path / "home").resolve() / "web"

    def test_empty_values_are_ignored(self, tmp_path: Path):
        config = RuntimeConfig.from_environment({"DEVFLOW_REPO_URL": ""}, cwd=tmp_path)
        assert config.repo_url == REPO_URL

    def test_uses_process_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert RuntimeConfig.from_environment({}).cwd == tmp_path.resolve()
