"""
Core Data Structures and Protocols for Map Class Generation.

This module defines the values that flow through one generation request:
the host context, the request parameters, the resolved properties, the
class descriptor handed to the template, and the explicit result type.
All data structures are immutable and live for a single request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple, Union

from ..model.elements import PropertyElement, ValueTypeDeclaration
from ..model.registry import TypeRegistry
from ..utils.exceptions import GenerationError


@dataclass(frozen=True)
class PropertySpec:
    """One resolved property."""
    key: str
    name: str
    type: str
    value_expr: str
    nullable_marker: str = ""

    def __post_init__(self):
        if not self.key or not self.key.strip():
            raise ValueError(f"Storage key of property '{self.name}' cannot be blank")

    @property
    def is_nullable(self) -> bool:
        return bool(self.nullable_marker)

    def to_template_record(self) -> Dict[str, str]:
        """The record shape the class template iterates over."""
        return {
            "key": self.key,
            "name": self.name,
            "type": self.type,
            "value": self.value_expr,
            "nullable": self.nullable_marker,
        }


@dataclass(frozen=True)
class ClassDescriptor:
    """Everything needed to render one generated class."""
    package_name: str
    class_name: str
    type_parameters: str
    superclass_name: str
    is_final: bool
    properties: Tuple[PropertySpec, ...]

    def to_template_vars(self) -> Dict[str, Any]:
        """Named variables for the class template."""
        return {
            "packageName": self.package_name,
            "className": self.class_name,
            "typeParameters": self.type_parameters,
            "classToExtend": self.superclass_name,
            "isFinal": self.is_final,
            "properties": [p.to_template_record() for p in self.properties],
        }


@dataclass(frozen=True)
class ExtensionContext:
    """The host's view of one value type."""
    declaration: ValueTypeDeclaration
    types: TypeRegistry

    @property
    def package_name(self) -> str:
        return self.declaration.package_name

    @property
    def properties(self) -> Dict[str, PropertyElement]:
        """Ordered mapping of property name to accessor."""
        return self.declaration.property_map()


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters of one ``generate_class`` call."""
    context: ExtensionContext
    class_name: str
    class_to_extend: str
    is_final: bool


@dataclass(frozen=True)
class Generated:
    """Successful generation carrying the complete source text."""
    source: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.source


@dataclass(frozen=True)
class Failed:
    """Failed generation. No source text is produced."""
    reason: str
    class_name: str = ""
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise GenerationError(self.reason, self.class_name) from self.error


GenerationResult = Union[Generated, Failed]


class ClassRenderer(Protocol):
    """Protocol for turning a descriptor into source text."""

    def render(self, descriptor: ClassDescriptor) -> str:
        ...
