"""
Tests for the dependency check.
"""

import pytest
from fakes import ALL_TOOLS, FakeProber

from devflow.core.models.capability import ToolId
from devflow.core.services.detection.dependencies import check_dependencies


def _without(*commands: str) -> dict:
    return {k: v for k, v in ALL_TOOLS.items() if k not in commands}


class TestSkip:
    def test_skip_never_probes(self, config):
        prober = FakeProber(ALL_TOOLS)
        report = check_dependencies(True, config=config, prober=prober)
        assert prober.call_log == []
        assert report.missing_required == []
        assert report.missing_optional == []
        assert report.os_id == "unknown"
        assert report.findings == []
        assert not report.has_errors


class TestAllPresent:
    def test_clean_report(self, config):
        report = check_dependencies(config=config, prober=FakeProber(ALL_TOOLS))
        assert not report.has_errors
        assert [f.tool for f in report.findings] == [
            ToolId.GIT,
            ToolId.CLAUDE,
            ToolId.NODE,
            ToolId.PYTHON,
            ToolId.GCC,
            ToolId.MAKE,
        ]
        assert all(f.ok for f in report.findings)

    def test_messages(self, config):
        report = check_dependencies(config=config, prober=FakeProber(ALL_TOOLS))
        messages = [f.message for f in report.findings]
        assert messages == [
            "Git: git version 2.43.0...",
            "Claude Code: installed",
            "Node.js: v20.11.1",
            "Python3: 3.12.1",
            "GCC: installed",
            "Make: installed",
        ]

    def test_os_from_config(self, config):
        report = check_dependencies(
            config=config.model_copy(update={"platform": "darwin"}),
            prober=FakeProber(ALL_TOOLS),
        )
        assert report.os_id == "macos"
        assert report.os_name == "macOS"


class TestRequired:
    def test_missing_git_is_an_error(self, config):
        report = check_dependencies(config=config, prober=FakeProber(_without("git")))
        assert report.missing_required == [ToolId.GIT]
        assert report.missing_optional == []
        assert report.has_errors
        assert report.findings[0].level == "error"
        assert report.findings[0].message == "Git: not found"

    def test_missing_claude_is_a_warning(self, config):
        report = check_dependencies(config=config, prober=FakeProber(_without("claude")))
        assert report.missing_required == [ToolId.CLAUDE]
        finding = report.findings[1]
        assert finding.level == "warning"
        assert "npm i -g @anthropic-ai/claude-code" in finding.message


class TestNode:
    def test_outdated(self, config):
        tools = {**ALL_TOOLS, "node": "v16.20.2"}
        report = check_dependencies(config=config, prober=FakeProber(tools))
        assert report.missing_optional == [ToolId.NODE]
        assert report.status_of(ToolId.NODE) == "outdated"
        assert report.findings[2].message == "Node.js: v16.20.2 (recommended 18+)"

    def test_exact_minimum_is_ok(self, config):
        tools = {**ALL_TOOLS, "node": "v18.0.0"}
        report = check_dependencies(config=config, prober=FakeProber(tools))
        assert report.status_of(ToolId.NODE) == "ok"

    def test_missing(self, config):
        report = check_dependencies(config=config, prober=FakeProber(_without("node")))
        assert report.missing_optional == [ToolId.NODE]
        assert report.status_of(ToolId.NODE) == "missing"

    @pytest.mark.parametrize("version", ["something odd", None])
    def test_unreadable_version_is_ok(self, config, version):
        tools = {**ALL_TOOLS, "node": version}
        report = check_dependencies(config=config, prober=FakeProber(tools))
        assert report.status_of(ToolId.NODE) == "ok"
        assert report.missing_optional == []


class TestPython:
    def test_falls_back_to_python(self, config):
        tools = {**_without("python3"), "python": "Python 3.11.4"}
        prober = FakeProber(tools)
        report = check_dependencies(config=config, prober=prober)
        assert "python3" in prober.call_log
        assert "python" in prober.call_log
        assert report.status_of(ToolId.PYTHON) == "ok"
        assert report.findings[3].message == "Python: 3.11.4"

    def test_python2_fallback_is_missing(self, config):
        tools = {**_without("python3"), "python": "Python 2.7.18"}
        report = check_dependencies(config=config, prober=FakeProber(tools))
        assert report.missing_optional == [ToolId.PYTHON]
        assert report.findings[3].message == "Python: 2.7.18 (Python 3 required)"

    def test_fallback_without_version_is_missing(self, config):
        tools = {**_without("python3"), "python": None}
        report = check_dependencies(config=config, prober=FakeProber(tools))
        assert report.missing_optional == [ToolId.PYTHON]

    def test_neither_found(self, config):
        report = check_dependencies(config=config, prober=FakeProber(_without("python3")))
        assert report.missing_optional == [ToolId.PYTHON]
        assert report.findings[3].message == "Python3: not found (required for Web IDE)"

    def test_python3_skips_fallback(self, config):
        prober = FakeProber(ALL_TOOLS)
        check_dependencies(config=config, prober=prober)
        assert "python" not in prober.call_log


class TestBuildTools:
    def test_missing_gcc_and_make(self, config):
        report = check_dependencies(config=config, prober=FakeProber(_without("gcc", "make")))
        assert report.missing_optional == [ToolId.GCC, ToolId.MAKE]
        assert report.missing_required == []
        assert report.has_errors

    def test_nothing_installed(self, config):
        report = check_dependencies(config=config, prober=FakeProber({}))
        assert report.missing_required == [ToolId.GIT, ToolId.CLAUDE]
        assert report.missing_optional == [ToolId.NODE, ToolId.PYTHON, ToolId.GCC, ToolId.MAKE]
