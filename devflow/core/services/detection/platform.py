"""
Detection — host operating system family.

Read-only: looks at the configured platform string and, on Linux, the
release-identification files.  Never raises; anything unreadable
degrades to the generic "linux" answer.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devflow.core.config.settings import RuntimeConfig
from devflow.core.models.capability import OSId, OSInfo

logger = logging.getLogger(__name__)

# Checked in order; the first family with a matching marker wins.
_LINUX_FAMILIES: tuple[tuple[OSId, str, tuple[str, ...]], ...] = (
    ("ubuntu", "Ubuntu/Debian", ("ubuntu", "debian", "linuxmint", "pop")),
    ("fedora", "Fedora", ("fedora",)),
    ("rhel", "RHEL/CentOS/Rocky", ("rhel", "centos", "rocky", "almalinux")),
    ("arch", "Arch Linux", ("arch", "manjaro")),
)

_GENERIC_LINUX = OSInfo(id="linux", name="Linux")


def detect_platform(config: RuntimeConfig) -> OSInfo:
    """Map the host platform to an OS family."""
    platform = config.platform
    if platform == "darwin":
        return OSInfo(id="macos", name="macOS")
    if platform in ("win32", "cygwin"):
        return OSInfo(id="windows", name="Windows")
    if not platform.startswith("linux"):
        logger.debug("Unrecognised platform %r", platform)
        return OSInfo()

    content = _read_release(config.release_files)
    if not content:
        return _GENERIC_LINUX
    return _match_distro(content)


def _read_release(paths: tuple[Path, ...]) -> str:
    """Return the first readable release file, lower-cased."""
    for path in paths:
        try:
            return path.read_text(encoding="utf-8", errors="replace").lower()
        except OSError:
            continue
    return ""


def _parse_os_release(content: str) -> list[str]:
    """Distribution ids from os-release: ``ID`` first, then ``ID_LIKE``."""
    fields: dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            fields[key.strip()] = value.strip().strip("'\"")
    ids = [fields["id"]] if fields.get("id") else []
    ids.extend(fields.get("id_like", "").split())
    return ids


def _match_distro(content: str) -> OSInfo:
    # Keys are lower-cased along with the rest of the file
    for distro_id in _parse_os_release(content):
        for os_id, name, markers in _LINUX_FAMILIES:
            if distro_id in markers:
                return OSInfo(id=os_id, name=name)

    # Free-text files such as /etc/redhat-release
    for os_id, name, markers in _LINUX_FAMILIES:
        if any(marker in content for marker in markers):
            return OSInfo(id=os_id, name=name)

    return _GENERIC_LINUX
