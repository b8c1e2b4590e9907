"""
Logging configuration — one-time setup for the ``devflow`` command.

Status lines for the user go through the Reporter; this module only
configures diagnostic logging, which goes to stderr (and optionally a
file) so it never mixes with ``devflow deps --json`` on stdout.

Console level precedence:
    --debug / --verbose / --quiet  >  DEVFLOW_LOG_LEVEL  >  WARNING

File output:
    DEVFLOW_LOG_FILE        path to append diagnostics to
    DEVFLOW_LOG_FILE_LEVEL  its level (default: same as the console)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from pydantic import BaseModel

# ── Format strings ──────────────────────────────────────────────

_FMT_MINIMAL = "%(message)s"

_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# The IDE version check runs in worker threads
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(threadName)s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(threadName)s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("urllib3", "charset_normalizer", "concurrent.futures")


class LogSettings(BaseModel):
    """Resolved logging options for one process."""

    level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None
    quiet_third_party: bool = True

    @classmethod
    def from_cli(
        cls,
        *,
        debug: bool = False,
        verbose: bool = False,
        quiet: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> LogSettings:
        """Combine the global CLI flags with the DEVFLOW_LOG_* variables."""
        env = os.environ if environ is None else environ
        return cls(
            level=resolve_level(debug, verbose, quiet, env.get("DEVFLOW_LOG_LEVEL")),
            log_file=env.get("DEVFLOW_LOG_FILE") or None,
            log_file_level=env.get("DEVFLOW_LOG_FILE_LEVEL") or None,
            quiet_third_party=not debug,
        )


def setup_logging(settings: LogSettings | None = None) -> None:
    """Install the console (and optional file) handler on the root logger.

    Replaces any handlers already installed, so calling it again (one
    CLI invocation after another in tests) does not stack output.
    """
    settings = settings or LogSettings()
    console_level = _parse_level(settings.level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_console_handler(console_level))
    root_level = console_level

    if settings.log_file:
        file_level = (
            _parse_level(settings.log_file_level) if settings.log_file_level else console_level
        )
        root.addHandler(_file_handler(settings.log_file, file_level))
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if settings.quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


# ── Handlers ────────────────────────────────────────────────────


def _console_handler(level: int) -> logging.Handler:
    if level <= logging.DEBUG:
        formatter = logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_DEBUG)
    elif level <= logging.INFO:
        formatter = logging.Formatter(_FMT_VERBOSE, datefmt=_DATEFMT_VERBOSE)
    else:
        formatter = logging.Formatter(_FMT_MINIMAL)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
    return handler


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
