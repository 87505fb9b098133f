"""
Declaration Loading.

Builds ``ValueTypeDeclaration`` objects from plain mappings, usually read
from a JSON or YAML document that a host wrote out for its value types::

    name: com.example.Person
    type_parameters: [T]
    supertypes: ["java.util.Map<String, Object>"]
    properties:
      - name: id
        method: id
        type: java.lang.Integer
        markers:
          - name: com.google.gson.annotations.SerializedName
            attributes: {value: identifier}
          - javax.annotation.Nullable
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .elements import (
    Marker,
    PropertyElement,
    TypeParameter,
    ValueTypeDeclaration,
    parse_type,
)
from ..utils.exceptions import DeclarationError, TypeParseError
from ..utils.logging import get_logger
from ..utils.string_utils import simple_name

logger = get_logger(__name__)


def _require(data: Mapping[str, Any], key: str, what: str, source: Optional[str]) -> str:
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise DeclarationError(f"{what} is missing '{key}'", source)
    if not isinstance(value, str):
        raise DeclarationError(f"{what} '{key}' must be a string, got {value!r}", source)
    return value


def marker_from_spec(spec: Union[str, Mapping[str, Any]], source: Optional[str] = None) -> Marker:
    """Build a marker from a name string or a ``{name, attributes}`` mapping."""
    if isinstance(spec, str):
        name, attributes = spec, {}
    elif isinstance(spec, Mapping):
        name = _require(spec, "name", "Marker", source)
        attributes = spec.get("attributes") or {}
        if not isinstance(attributes, Mapping):
            raise DeclarationError(f"Attributes of marker '{name}' must be a mapping", source)
    else:
        raise DeclarationError(f"Unsupported marker entry: {spec!r}", source)

    name = name.lstrip("@").strip()
    qualified = name if "." in name else ""
    return Marker(simple_name(name), qualified, dict(attributes))


def property_from_spec(spec: Mapping[str, Any], source: Optional[str] = None) -> PropertyElement:
    """Build an accessor from its mapping form."""
    if not isinstance(spec, Mapping):
        raise DeclarationError(f"Property entry must be a mapping, got {spec!r}", source)
    name = _require(spec, "name", "Property", source)
    return_type = _require(spec, "type", f"Property '{name}'", source)
    method = spec.get("method") or name
    if not isinstance(method, str):
        raise DeclarationError(f"Property '{name}' method must be a string, got {method!r}", source)
    markers = tuple(marker_from_spec(m, source) for m in spec.get("markers") or ())
    return PropertyElement(
        name=name,
        method_name=method,
        return_type=return_type,
        markers=markers,
    )


def _type_parameter_from_spec(spec: Union[str, Mapping[str, Any]], source: Optional[str]) -> TypeParameter:
    if isinstance(spec, str):
        return TypeParameter(spec.strip())
    if not isinstance(spec, Mapping):
        raise DeclarationError(f"Unsupported type parameter entry: {spec!r}", source)
    name = _require(spec, "name", "Type parameter", source)
    bounds = tuple(parse_type(b) for b in spec.get("bounds") or ())
    return TypeParameter(name, bounds)


def declaration_from_dict(data: Mapping[str, Any], source: Optional[str] = None) -> ValueTypeDeclaration:
    """
    Build a value-type declaration from a mapping.

    Args:
        data: Mapping with ``name`` (qualified), optional ``type_parameters``,
            ``supertypes`` and ``properties``
        source: Where the mapping came from, used in error messages

    Raises:
        DeclarationError: if mandatory fields are missing or a type
            expression cannot be parsed
    """
    if not isinstance(data, Mapping):
        raise DeclarationError("Declaration must be a mapping", source)

    qualified_name = _require(data, "name", "Declaration", source)
    try:
        type_parameters = tuple(
            _type_parameter_from_spec(p, source) for p in data.get("type_parameters") or ()
        )
        supertypes = tuple(parse_type(s) for s in data.get("supertypes") or ())
    except TypeParseError as e:
        raise DeclarationError(f"Invalid type in declaration '{qualified_name}': {e}", source) from e

    properties = tuple(property_from_spec(p, source) for p in data.get("properties") or ())
    names = [p.name for p in properties]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise DeclarationError(
            f"Declaration '{qualified_name}' repeats properties {', '.join(duplicates)}", source
        )

    declaration = ValueTypeDeclaration(
        qualified_name=qualified_name,
        type_parameters=type_parameters,
        supertypes=supertypes,
        properties=properties,
    )
    logger.debug(f"Loaded declaration {qualified_name} with {len(properties)} properties")
    return declaration


def _read_document(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def load_declarations(path: Union[str, Path]) -> List[ValueTypeDeclaration]:
    """
    Load every declaration in a JSON or YAML document.

    The document holds either one declaration mapping or a list of them.
    """
    path = Path(path)
    try:
        document = _read_document(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise DeclarationError(f"Cannot read declarations: {e}", str(path)) from e

    if isinstance(document, list):
        return [declaration_from_dict(d, str(path)) for d in document]
    return [declaration_from_dict(document, str(path))]


def load_declaration(path: Union[str, Path]) -> ValueTypeDeclaration:
    """Load a document that holds exactly one declaration."""
    declarations = load_declarations(path)
    if len(declarations) != 1:
        raise DeclarationError(f"Expected one declaration, found {len(declarations)}", str(path))
    return declarations[0]


def declaration_to_dict(declaration: ValueTypeDeclaration) -> Dict[str, Any]:
    """Inverse of ``declaration_from_dict`` for the fields it reads."""
    return {
        "name": declaration.qualified_name,
        "type_parameters": [
            {"name": p.name, "bounds": [str(b) for b in p.bounds]} if p.bounds else p.name
            for p in declaration.type_parameters
        ],
        "supertypes": [str(s) for s in declaration.supertypes],
        "properties": [
            {
                "name": p.name,
                "method": p.method_name,
                "type": p.return_type,
                "markers": [
                    {"name": m.qualified_name or m.simple_name, "attributes": dict(m.attributes)}
                    for m in p.markers
                ],
            }
            for p in declaration.properties
        ],
    }
