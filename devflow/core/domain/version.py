"""
Domain — dotted version comparison (pure).

No I/O, no subprocess.
"""

from __future__ import annotations

from itertools import zip_longest


def parse_version(text: str) -> tuple[int, ...]:
    """Parse ``"1.2.3"`` (or ``"v1.2.3"``) into ``(1, 2, 3)``.

    Raises:
        ValueError: a component is not a non-negative integer.
    """
    cleaned = text.strip().removeprefix("v")
    parts = cleaned.split(".")
    if not all(p.isdigit() for p in parts):
        raise ValueError(f"Not a dotted numeric version: {text!r}")
    return tuple(int(p) for p in parts)


def is_newer(remote: str, local: str) -> bool:
    """Whether ``remote`` is strictly greater than ``local``.

    Components are compared left to right as integers; a missing trailing
    component counts as 0, so ``"1.0"`` equals ``"1.0.0"``.
    """
    pairs = zip_longest(parse_version(remote), parse_version(local), fillvalue=0)
    for remote_part, local_part in pairs:
        if remote_part > local_part:
            return True
        if remote_part < local_part:
            return False
    return False
