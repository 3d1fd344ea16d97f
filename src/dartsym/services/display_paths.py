"""Friendly display paths for files reported by the analysis server."""

from __future__ import annotations

import os
import re
from pathlib import PurePath

from dartsym.models.paths import CanonicalPath, PackageReference, UnknownPath, WorkspaceRelative


def canonicalize_path(
    path: str, workspace_root: str | None = None, *, sep: str = os.sep
) -> CanonicalPath:
    """Classify ``path`` as workspace-relative, a pub-cache package file, or unknown.

    The analysis server reports absolute paths into the pub cache; those are
    rewritten to ``package:name/path`` form. ``sep`` is the separator used in
    ``path`` and exists so other platforms' paths can be handled.
    """
    if workspace_root is not None:
        relative = _relative_to(path, workspace_root, sep)
        if relative is not None:
            return WorkspaceRelative(relative)

    match = _package_cache_pattern(sep).match(path)
    if match is None:
        return UnknownPath()

    package_dir, rest = match.groups()
    # Package folders are versioned: "collection-1.15.0".
    name = package_dir.split("-")[0]
    lib_prefix = f"lib{sep}"
    if rest.startswith(lib_prefix):
        rest = rest[len(lib_prefix) :]
    return PackageReference(name=name, path=rest.replace("\\", "/"))


def display_path(
    path: str, workspace_root: str | None = None, *, sep: str = os.sep
) -> str | None:
    return canonicalize_path(path, workspace_root, sep=sep).display


def _relative_to(path: str, root: str, sep: str) -> str | None:
    if sep == os.sep:
        target, base = PurePath(path), PurePath(root)
        if not target.is_relative_to(base):
            return None
        return target.relative_to(base).as_posix()
    prefix = root.rstrip(sep) + sep
    if not path.startswith(prefix):
        return None
    return path[len(prefix) :].replace(sep, "/")


def _package_cache_pattern(sep: str) -> re.Pattern[str]:
    slash = re.escape(sep)
    not_slashes = f"[^{slash}]+"
    return re.compile(
        f".*{slash}(?:hosted{slash}{not_slashes}|git){slash}({not_slashes}){slash}(.*)"
    )
