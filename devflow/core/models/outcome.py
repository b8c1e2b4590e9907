"""
Outcome model — the receipt of one best-effort install step.

Steps that may fail without aborting the install (copying a subtree,
removing the temp workspace) return an Outcome instead of raising.
``ignored`` marks a failure that is swallowed on purpose, so tests can
still see that the step was attempted.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class Outcome(BaseModel):
    """Result of a single install step."""

    step: str
    status: Literal["ok", "skipped", "warning", "ignored"] = "ok"
    message: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def success(cls, step: str, message: str = "", **kwargs: Any) -> Outcome:
        return cls(step=step, status="ok", message=message, **kwargs)

    @classmethod
    def skip(cls, step: str, message: str = "", **kwargs: Any) -> Outcome:
        return cls(step=step, status="skipped", message=message, **kwargs)

    @classmethod
    def warning(cls, step: str, message: str, error: str | None = None) -> Outcome:
        return cls(step=step, status="warning", message=message, error=error)

    @classmethod
    def ignored(cls, step: str, message: str, error: str | None = None) -> Outcome:
        return cls(step=step, status="ignored", message=message, error=error)
