"""Adapters — bindings for executables, git and the network.

Public re-exports for convenient access.
"""

from devflow.adapters.base import (
    Adapter,
    ManifestSource,
    ProcessRunner,
    Prober,
    VersionControl,
)
from devflow.adapters.http.manifest import RemoteManifest
from devflow.adapters.shell.command import ShellProber, ShellRunner
from devflow.adapters.vcs.git import GitAdapter

__all__ = [
    "Adapter",
    "GitAdapter",
    "ManifestSource",
    "ProcessRunner",
    "Prober",
    "RemoteManifest",
    "ShellProber",
    "ShellRunner",
    "VersionControl",
]
