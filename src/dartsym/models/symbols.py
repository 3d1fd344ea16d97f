"""Symbol entries presented to the user, and their location states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class SymbolKind(IntEnum):
    """Presentation-level symbol kinds (LSP numbering)."""

    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


class Position(BaseModel):
    """Zero-based line/character position."""

    model_config = ConfigDict(frozen=True)

    line: int
    character: int


class Range(BaseModel):
    """Half-open range between two positions."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class UnresolvedLocation(BaseModel):
    """Deferred location: enough to find the declaration later."""

    model_config = ConfigDict(frozen=True)

    state: Literal["unresolved"] = "unresolved"
    file: str
    offset: int
    length: int

    def resolve(self, uri: str, range_: Range) -> ResolvedLocation:
        """The resolved state for this location, once its document is open."""
        return ResolvedLocation(uri=uri, range=range_)


class ResolvedLocation(BaseModel):
    """Concrete location inside an opened document."""

    model_config = ConfigDict(frozen=True)

    state: Literal["resolved"] = "resolved"
    uri: str
    range: Range


SymbolLocation = Annotated[
    UnresolvedLocation | ResolvedLocation, Field(discriminator="state")
]


class SymbolEntry(BaseModel):
    """A workspace symbol ready for display.

    ``location`` starts out unresolved and is replaced by a
    :class:`ResolvedLocation` the first time the entry is resolved. Entries
    built elsewhere may carry no location at all.
    """

    name: str
    kind: SymbolKind
    container_name: str | None = None
    location: SymbolLocation | None = None

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.location, ResolvedLocation)


@dataclass(frozen=True)
class ResolutionError:
    """Why a symbol's location could not be resolved."""

    file: str
    reason: str

    def __str__(self) -> str:
        return f"Symbol location unavailable for {self.file}: {self.reason}"
