"""
Domain models — Pydantic types for the DevFlow CLI.

All models are re-exported here for convenient access:

    from devflow.core.models import CapabilityReport, InitResult, Outcome
"""

from devflow.core.models.capability import (
    REQUIRED_TOOLS,
    CapabilityReport,
    Finding,
    OSInfo,
    ToolId,
    ToolProbe,
)
from devflow.core.models.install import (
    CONFLICT_PATHS,
    INSTALL_PLAN,
    IdeUpdateResult,
    InitResult,
    VersionCheck,
)
from devflow.core.models.outcome import Outcome

__all__ = [
    # capability.py
    "CapabilityReport",
    "Finding",
    "OSInfo",
    "REQUIRED_TOOLS",
    "ToolId",
    "ToolProbe",
    # install.py
    "CONFLICT_PATHS",
    "INSTALL_PLAN",
    "IdeUpdateResult",
    "InitResult",
    "VersionCheck",
    # outcome.py
    "Outcome",
]
