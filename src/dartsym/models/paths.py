"""Canonical display forms of a source file path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class WorkspaceRelative:
    """A file inside one of the workspace roots."""

    path: str

    @property
    def display(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class PackageReference:
    """A file inside a package in the pub cache (``package:name/path``)."""

    name: str
    path: str

    @property
    def display(self) -> str:
        return f"package:{self.name}/{self.path}"


@dataclass(frozen=True, slots=True)
class UnknownPath:
    """A file that is neither in the workspace nor in the pub cache."""

    @property
    def display(self) -> None:
        return None


CanonicalPath: TypeAlias = WorkspaceRelative | PackageReference | UnknownPath
