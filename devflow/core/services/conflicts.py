"""
Conflict detection — which DevFlow paths already exist in the target.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from devflow.core.models.install import CONFLICT_PATHS
from devflow.core.observability.reporter import Reporter

logger = logging.getLogger(__name__)

CONFLICT_QUESTION = "Do you want to continue and replace existing DevFlow files? (y/n) "


def find_conflicts(target: Path) -> list[str]:
    """Return the install-plan directories that already exist under ``target``."""
    conflicts = [name for name in CONFLICT_PATHS if (target / name).exists()]
    if conflicts:
        logger.info("Existing DevFlow paths in %s: %s", target, ", ".join(conflicts))
    return conflicts


def is_negative(answer: str) -> bool:
    """Only an answer starting with "n" (any case) declines."""
    return answer.strip().lower().startswith("n")


def resolve_conflicts(
    conflicts: list[str],
    *,
    prompt: Callable[[str], str],
    reporter: Reporter,
) -> bool:
    """Ask whether to overwrite ``conflicts``.

    Returns:
        True to continue the install, False if the user declined.
        No conflicts → True without asking.
    """
    if not conflicts:
        return True

    reporter.warn("The following DevFlow files/folders already exist in the target directory:")
    for name in conflicts:
        reporter.info(f"  - {name}")

    answer = prompt(CONFLICT_QUESTION)
    return not is_negative(answer)
