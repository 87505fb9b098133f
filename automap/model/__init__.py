"""
Host Metadata Model.

Read-only types describing value-type declarations as the host compiler
sees them:
- elements: type references, type elements, accessors and markers
- registry: name lookup and assignability between types
- loader: declarations from JSON/YAML documents
"""

from .elements import (
    DeclaredType,
    TypeParameter,
    MethodElement,
    TypeElement,
    Marker,
    PropertyElement,
    ValueTypeDeclaration,
    parse_type,
)
from .registry import TypeRegistry, OBJECT, STRING, MAP
from .loader import (
    declaration_from_dict,
    declaration_to_dict,
    load_declaration,
    load_declarations,
)

__all__ = [
    "DeclaredType",
    "TypeParameter",
    "MethodElement",
    "TypeElement",
    "Marker",
    "PropertyElement",
    "ValueTypeDeclaration",
    "parse_type",
    "TypeRegistry",
    "OBJECT",
    "STRING",
    "MAP",
    "declaration_from_dict",
    "declaration_to_dict",
    "load_declaration",
    "load_declarations",
]
