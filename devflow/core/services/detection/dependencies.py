"""
Detection — dependency check for DevFlow and its web IDE.

Probes a fixed list of executables and applies a per-tool policy:
existence alone for git, Claude Code, GCC and Make; a minimum major
version for Node.js; Python 3 with a fallback to ``python``.
"""

from __future__ import annotations

import logging
import re

from devflow.adapters.base import Prober
from devflow.adapters.shell.command import ShellProber
from devflow.core.config.settings import RuntimeConfig
from devflow.core.models.capability import CapabilityReport, Finding, ToolId
from devflow.core.services.detection.platform import detect_platform

logger = logging.getLogger(__name__)

NODE_MIN_MAJOR = 18
PYTHON_MIN_MAJOR = 3

_NODE_MAJOR = re.compile(r"v?(\d+)")
_PYTHON_MAJOR = re.compile(r"Python (\d+)")


def check_dependencies(
    skip: bool = False,
    *,
    config: RuntimeConfig,
    prober: Prober | None = None,
) -> CapabilityReport:
    """Probe the host for the tools DevFlow needs.

    Args:
        skip: Return an all-clear report without probing anything
            (not even the OS).
        config: Runtime configuration (platform, release files).
        prober: Executable prober (default: ``ShellProber``).

    Returns:
        CapabilityReport with one finding per tool.
    """
    if skip:
        return CapabilityReport()

    prober = prober or ShellProber()
    os_info = detect_platform(config)
    report = CapabilityReport(os_id=os_info.id, os_name=os_info.name)
    logger.debug("Checking dependencies on %s", os_info.name)

    for check in (_check_git, _check_claude, _check_node, _check_python, _check_gcc, _check_make):
        finding = check(prober)
        logger.debug("%s: %s (%s)", finding.tool.value, finding.status, finding.message)
        report.add(finding)

    return report


# ── Required ────────────────────────────────────────────────────


def _check_git(prober: Prober) -> Finding:
    probe = prober.probe("git")
    if not probe.found:
        return Finding(tool=ToolId.GIT, status="missing", message="Git: not found")
    return Finding(tool=ToolId.GIT, message=f"Git: {probe.first_line[:20]}...")


def _check_claude(prober: Prober) -> Finding:
    if not prober.probe("claude").found:
        return Finding(
            tool=ToolId.CLAUDE,
            status="missing",
            message="Claude Code: not found (npm i -g @anthropic-ai/claude-code)",
        )
    return Finding(tool=ToolId.CLAUDE, message="Claude Code: installed")


# ── Optional (web IDE) ──────────────────────────────────────────


def _check_node(prober: Prober) -> Finding:
    probe = prober.probe("node")
    if not probe.found:
        return Finding(
            tool=ToolId.NODE,
            status="missing",
            message="Node.js: not found (required for Web IDE)",
        )

    line = probe.first_line
    match = _NODE_MAJOR.search(line)
    if match and int(match.group(1)) < NODE_MIN_MAJOR:
        return Finding(
            tool=ToolId.NODE,
            status="outdated",
            message=f"Node.js: {line} (recommended {NODE_MIN_MAJOR}+)",
        )
    return Finding(tool=ToolId.NODE, message=f"Node.js: {line or 'installed'}")


def _check_python(prober: Prober) -> Finding:
    probe = prober.probe("python3")
    if probe.found:
        version = probe.first_line.replace("Python ", "")
        return Finding(tool=ToolId.PYTHON, message=f"Python3: {version or 'installed'}")

    probe = prober.probe("python")
    if not probe.found:
        return Finding(
            tool=ToolId.PYTHON,
            status="missing",
            message="Python3: not found (required for Web IDE)",
        )

    line = probe.first_line
    match = _PYTHON_MAJOR.search(line)
    version = line.replace("Python ", "") or "unknown version"
    if match and int(match.group(1)) >= PYTHON_MIN_MAJOR:
        return Finding(tool=ToolId.PYTHON, message=f"Python: {version}")
    return Finding(
        tool=ToolId.PYTHON,
        status="missing",
        message=f"Python: {version} (Python 3 required)",
    )


def _check_gcc(prober: Prober) -> Finding:
    if not prober.probe("gcc").found:
        return Finding(tool=ToolId.GCC, status="missing", message="GCC: not found (required for Web IDE)")
    return Finding(tool=ToolId.GCC, message="GCC: installed")


def _check_make(prober: Prober) -> Finding:
    if not prober.probe("make").found:
        return Finding(tool=ToolId.MAKE, status="missing", message="Make: not found (required for Web IDE)")
    return Finding(tool=ToolId.MAKE, message="Make: installed")
