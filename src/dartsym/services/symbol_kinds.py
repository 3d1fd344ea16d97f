"""Map analysis server element kinds onto presentation symbol kinds."""

from __future__ import annotations

from dartsym.models.declarations import ElementKind
from dartsym.models.symbols import SymbolKind

_SYMBOL_KINDS: dict[ElementKind, SymbolKind] = {
    ElementKind.CLASS: SymbolKind.CLASS,
    ElementKind.CLASS_TYPE_ALIAS: SymbolKind.CLASS,
    ElementKind.COMPILATION_UNIT: SymbolKind.MODULE,
    ElementKind.CONSTRUCTOR: SymbolKind.CONSTRUCTOR,
    ElementKind.CONSTRUCTOR_INVOCATION: SymbolKind.CONSTRUCTOR,
    ElementKind.ENUM: SymbolKind.ENUM,
    ElementKind.ENUM_CONSTANT: SymbolKind.ENUM_MEMBER,
    ElementKind.EXTENSION: SymbolKind.CLASS,
    ElementKind.FIELD: SymbolKind.FIELD,
    ElementKind.FILE: SymbolKind.FILE,
    ElementKind.FUNCTION: SymbolKind.FUNCTION,
    ElementKind.FUNCTION_INVOCATION: SymbolKind.FUNCTION,
    ElementKind.FUNCTION_TYPE_ALIAS: SymbolKind.FUNCTION,
    ElementKind.GETTER: SymbolKind.PROPERTY,
    ElementKind.LABEL: SymbolKind.MODULE,
    ElementKind.LIBRARY: SymbolKind.NAMESPACE,
    ElementKind.LOCAL_VARIABLE: SymbolKind.VARIABLE,
    ElementKind.METHOD: SymbolKind.METHOD,
    ElementKind.MIXIN: SymbolKind.CLASS,
    ElementKind.PARAMETER: SymbolKind.VARIABLE,
    ElementKind.PREFIX: SymbolKind.VARIABLE,
    ElementKind.SETTER: SymbolKind.PROPERTY,
    ElementKind.TOP_LEVEL_VARIABLE: SymbolKind.VARIABLE,
    ElementKind.TYPE_ALIAS: SymbolKind.CLASS,
    ElementKind.TYPE_PARAMETER: SymbolKind.TYPE_PARAMETER,
    ElementKind.UNIT_TEST_GROUP: SymbolKind.MODULE,
    ElementKind.UNIT_TEST_TEST: SymbolKind.METHOD,
}


def symbol_kind_for_element_kind(kind: ElementKind) -> SymbolKind:
    return _SYMBOL_KINDS.get(kind, SymbolKind.OBJECT)
