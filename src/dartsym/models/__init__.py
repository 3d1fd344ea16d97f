"""Data models for dartsym."""

from dartsym.models.declarations import (
    ElementDeclaration,
    ElementDeclarationsResult,
    ElementKind,
)
from dartsym.models.paths import CanonicalPath, PackageReference, UnknownPath, WorkspaceRelative
from dartsym.models.symbols import (
    Position,
    Range,
    ResolutionError,
    ResolvedLocation,
    SymbolEntry,
    SymbolKind,
    UnresolvedLocation,
)

__all__ = [
    "CanonicalPath",
    "ElementDeclaration",
    "ElementDeclarationsResult",
    "ElementKind",
    "PackageReference",
    "Position",
    "Range",
    "ResolutionError",
    "ResolvedLocation",
    "SymbolEntry",
    "SymbolKind",
    "UnknownPath",
    "UnresolvedLocation",
    "WorkspaceRelative",
]
