"""Locate a Dart SDK and the analysis server inside it."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

ANALYSIS_SERVER_SNAPSHOT = Path("bin") / "snapshots" / "analysis_server.dart.snapshot"
DART_VM = Path("bin") / ("dart.exe" if sys.platform == "win32" else "dart")


def dart_vm_path(sdk_root: Path) -> Path:
    return sdk_root / DART_VM


def analysis_server_snapshot_path(sdk_root: Path) -> Path:
    return sdk_root / ANALYSIS_SERVER_SNAPSHOT


def is_valid_dart_sdk(bin_dir: Path) -> bool:
    """Return True if ``bin_dir`` is the ``bin`` folder of an SDK with an analysis server."""
    return analysis_server_snapshot_path(bin_dir.parent).is_file()


def find_dart_sdk(sdk_path: Path | None = None, search_path: str | None = None) -> Path | None:
    """Find the root of a usable Dart SDK.

    The configured ``sdk_path`` wins if it is valid; otherwise each entry of
    ``search_path`` (defaults to ``$PATH``) is tried as an SDK ``bin`` folder.
    """
    if search_path is None:
        search_path = os.environ.get("PATH", "")
    candidates = [Path(entry) for entry in search_path.split(os.pathsep) if entry]
    if sdk_path is not None:
        candidates.insert(0, sdk_path / "bin")

    for candidate in candidates:
        if is_valid_dart_sdk(candidate):
            logger.debug("Using Dart SDK at %s", candidate.parent)
            return candidate.parent

    logger.info("No Dart SDK found (configured: %s)", sdk_path)
    return None
