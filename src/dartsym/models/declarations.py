"""Declaration records returned by the analysis server search."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ElementKind(StrEnum):
    """Element kinds reported by the Dart analysis server."""

    CLASS = "CLASS"
    CLASS_TYPE_ALIAS = "CLASS_TYPE_ALIAS"
    COMPILATION_UNIT = "COMPILATION_UNIT"
    CONSTRUCTOR = "CONSTRUCTOR"
    CONSTRUCTOR_INVOCATION = "CONSTRUCTOR_INVOCATION"
    ENUM = "ENUM"
    ENUM_CONSTANT = "ENUM_CONSTANT"
    EXTENSION = "EXTENSION"
    FIELD = "FIELD"
    FILE = "FILE"
    FUNCTION = "FUNCTION"
    FUNCTION_INVOCATION = "FUNCTION_INVOCATION"
    FUNCTION_TYPE_ALIAS = "FUNCTION_TYPE_ALIAS"
    GETTER = "GETTER"
    LABEL = "LABEL"
    LIBRARY = "LIBRARY"
    LOCAL_VARIABLE = "LOCAL_VARIABLE"
    METHOD = "METHOD"
    MIXIN = "MIXIN"
    PARAMETER = "PARAMETER"
    PREFIX = "PREFIX"
    SETTER = "SETTER"
    TOP_LEVEL_VARIABLE = "TOP_LEVEL_VARIABLE"
    TYPE_ALIAS = "TYPE_ALIAS"
    TYPE_PARAMETER = "TYPE_PARAMETER"
    UNIT_TEST_GROUP = "UNIT_TEST_GROUP"
    UNIT_TEST_TEST = "UNIT_TEST_TEST"
    UNKNOWN = "UNKNOWN"


_KNOWN_KINDS = frozenset(kind.value for kind in ElementKind)


class ElementDeclaration(BaseModel):
    """A single declaration hit from ``search.getElementDeclarations``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    kind: ElementKind = ElementKind.UNKNOWN
    file_index: int = Field(alias="fileIndex")
    offset: int = 0
    line: int = 0
    column: int = 0
    code_offset: int = Field(default=0, alias="codeOffset")
    code_length: int = Field(default=0, alias="codeLength")
    class_name: str | None = Field(default=None, alias="className")
    parameters: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _unknown_kinds(cls, value: object) -> object:
        if isinstance(value, str) and value not in _KNOWN_KINDS:
            return ElementKind.UNKNOWN
        return value


class ElementDeclarationsResult(BaseModel):
    """Declarations plus the deduplicated list of files they reference."""

    model_config = ConfigDict(frozen=True)

    declarations: list[ElementDeclaration] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
