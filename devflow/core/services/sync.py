"""
Directory synchronizer — mirror a template tree into a target.

Plain templates only: directories are recreated, regular files are
copied byte-for-byte (overwriting).  The first failure aborts the call.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(source: Path, target: Path) -> int:
    """Recursively copy the contents of ``source`` into ``target``.

    Existing files at the same relative path are overwritten; files
    that only exist in ``target`` are left alone.

    Returns:
        Number of files copied.

    Raises:
        OSError: ``source`` is missing/unreadable or a copy failed.
    """
    target.mkdir(parents=True, exist_ok=True)
    copied = 0

    for entry in sorted(source.iterdir()):
        destination = target / entry.name
        if entry.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            copied += copy_tree(entry, destination)
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry, destination)
            copied += 1

    logger.debug("Copied %d file(s) %s → %s", copied, source, target)
    return copied
