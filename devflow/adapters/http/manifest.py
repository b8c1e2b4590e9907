"""
Remote manifest adapter — read ``version`` from a raw JSON file over HTTPS.

Read-only and best-effort: every failure (HTTP error status, network
error, bad JSON, missing field) resolves to ``None``.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request

from devflow import __version__
from devflow.adapters.base import ManifestSource

logger = logging.getLogger(__name__)


class RemoteManifest(ManifestSource):
    """Fetch a JSON manifest with ``urllib``."""

    @property
    def name(self) -> str:
        return "http"

    def fetch_version(self, url: str) -> str | None:
        req = urllib.request.Request(
            url,
            headers={"User-Agent": f"devflow-cli/{__version__}", "Accept": "application/json"},
        )
        try:
            with urllib.request.urlopen(req) as resp:
                raw = resp.read()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            # HTTPError (non-2xx) is a URLError subclass
            logger.debug("Manifest fetch failed for %s: %s", url, exc)
            return None

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Manifest at %s is not JSON: %s", url, exc)
            return None

        if not isinstance(data, dict):
            return None
        version = data.get("version")
        return version if isinstance(version, str) else None
