"""Build presentable symbol entries from raw declarations."""

from __future__ import annotations

from dataclasses import dataclass

from dartsym.models.declarations import ElementDeclaration, ElementKind
from dartsym.models.symbols import SymbolEntry, UnresolvedLocation
from dartsym.services.symbol_kinds import symbol_kind_for_element_kind


@dataclass(frozen=True, slots=True)
class SymbolNames:
    name: str
    container_name: str | None


def symbol_names(
    declaration: ElementDeclaration,
    display_path: str | None,
    *,
    include_file_name: bool = True,
) -> SymbolNames:
    """Compute the display name and container for a declaration.

    Constructors arrive without their class name, so it is added:
    ``""`` becomes ``MyClass`` and ``"named"`` becomes ``MyClass.named``.
    With ``include_file_name`` the container is the file's display path and
    members get a ``ClassName.`` prefix; otherwise the container is the class.
    """
    name = declaration.name
    class_name = declaration.class_name
    prefixed_with_class = False
    if declaration.kind == ElementKind.CONSTRUCTOR and class_name:
        prefixed_with_class = True
        name = f"{class_name}.{name}" if name else class_name

    # Setter parameters are always "(value)", which adds nothing.
    if declaration.parameters and declaration.kind != ElementKind.SETTER:
        name += declaration.parameters

    if not include_file_name:
        return SymbolNames(name=name, container_name=class_name)

    if class_name and not prefixed_with_class:
        name = f"{class_name}.{name}"
    return SymbolNames(name=name, container_name=display_path)


def build_symbol_entry(
    declaration: ElementDeclaration, file: str, display_path: str | None
) -> SymbolEntry:
    """Build an entry whose location is left unresolved until it is opened."""
    names = symbol_names(declaration, display_path)
    return SymbolEntry(
        name=names.name,
        kind=symbol_kind_for_element_kind(declaration.kind),
        container_name=names.container_name,
        location=UnresolvedLocation(
            file=file,
            offset=declaration.code_offset,
            length=declaration.code_length,
        ),
    )
