"""
Install instructions — OS-specific commands for missing dependencies.

Pure: turns a ``CapabilityReport`` into the shell lines a user can copy.
Rendering is the caller's job.
"""

from __future__ import annotations

from devflow.core.models.capability import CapabilityReport, ToolId

_NODESOURCE_DEB = [
    "  # Node.js 20 LTS:",
    "  curl -fsSL https://deb.nodesource.com/setup_20.x | sudo -E bash -",
    "  sudo apt-get install -y nodejs",
    "",
]

_WEB_DEPS: dict[str, list[str]] = {
    "ubuntu": [
        "  # Install dependencies (Debian/Ubuntu):",
        "  sudo apt-get update",
        "  sudo apt-get install -y build-essential python3 git",
        "",
    ],
    "fedora": [
        "  # Install dependencies (Fedora):",
        "  sudo dnf groupinstall -y 'Development Tools'",
        "  sudo dnf install -y python3 git nodejs npm",
        "",
    ],
    "rhel": [
        "  # Install dependencies (RHEL/CentOS):",
        "  sudo dnf groupinstall -y 'Development Tools'",
        "  sudo dnf install -y python3 git",
        "",
        "  # Node.js 20 LTS:",
        "  curl -fsSL https://rpm.nodesource.com/setup_20.x | sudo bash -",
        "  sudo dnf install -y nodejs",
        "",
    ],
    "arch": [
        "  # Install dependencies (Arch):",
        "  sudo pacman -S base-devel python git nodejs npm",
        "",
    ],
    "macos": [
        "  # Install dependencies (macOS):",
        "  xcode-select --install",
        "  brew install node",
        "",
    ],
    "windows": [
        "  # Install dependencies (Windows):",
        "  # Use WSL (Windows Subsystem for Linux)",
        "  # PowerShell as Admin:",
        "  wsl --install",
        "  # Then follow Debian/Ubuntu instructions in WSL",
        "",
    ],
}

_WEB_DEPS_MANUAL = [
    "  # Install manually: Node.js 18+, Python 3, GCC, Make, Git",
    "",
]

_CLAUDE = [
    "  # Claude Code:",
    "  npm install -g @anthropic-ai/claude-code",
    "  claude login",
    "",
]

_GIT: dict[str, str] = {
    "ubuntu": "  sudo apt-get install -y git",
    "fedora": "  sudo dnf install -y git",
    "rhel": "  sudo dnf install -y git",
    "arch": "  sudo pacman -S git",
    "macos": "  xcode-select --install",
}


def install_instructions(report: CapabilityReport) -> list[str]:
    """Shell lines that would install what ``report`` found missing.

    Returns an empty list when nothing is missing.
    """
    if not report.has_errors:
        return []

    lines: list[str] = []

    if report.missing_optional:
        lines.extend(_WEB_DEPS.get(report.os_id, _WEB_DEPS_MANUAL))
        # An outdated Node.js needs an upgrade, not the NodeSource bootstrap
        if report.os_id == "ubuntu" and report.status_of(ToolId.NODE) == "missing":
            lines.extend(_NODESOURCE_DEB)

    if ToolId.CLAUDE in report.missing_required:
        lines.extend(_CLAUDE)

    if ToolId.GIT in report.missing_required and report.os_id in _GIT:
        lines.extend(["  # Git:", _GIT[report.os_id], ""])

    return lines
