"""
Applicability Gate.

Decides whether a value type is a ``Map<String, Object>`` and which of
the map's abstract members the generated class takes over.
"""

from __future__ import annotations

from typing import FrozenSet

from ..model.elements import DeclaredType, MethodElement, TypeElement
from ..model.registry import MAP, OBJECT, STRING, TypeRegistry

CONSUMED_METHOD_NAMES = frozenset({
    "clear",
    "containsKey",
    "containsValue",
    "entrySet",
    "get",
    "isEmpty",
    "keySet",
    "put",
    "putAll",
    "size",
    "values",
})

# Only the single-argument remove; remove(key, value) is a default method
REMOVE = "remove"


def map_type(types: TypeRegistry) -> DeclaredType:
    """The canonical ``java.util.Map<java.lang.String, java.lang.Object>``."""
    return types.get_declared_type(MAP, DeclaredType(STRING), DeclaredType(OBJECT))


def applicable(declaration: TypeElement, types: TypeRegistry) -> bool:
    """True iff ``declaration`` is assignable to ``Map<String, Object>``."""
    return types.is_assignable(declaration, map_type(types))


def consumes(method: MethodElement) -> bool:
    if method.name == REMOVE:
        return len(method.parameters) == 1
    return method.name in CONSUMED_METHOD_NAMES


def consumed_methods(types: TypeRegistry) -> FrozenSet[MethodElement]:
    """
    The map members the generated class implements.

    ``equals``/``hashCode`` and the default and static members of the map
    interface are never consumed.
    """
    map_element = types.get_type_element(MAP)
    if map_element is None:
        return frozenset()
    object_element = types.get_type_element(OBJECT)
    object_names = {m.name for m in object_element.members} if object_element else set()
    return frozenset(
        m for m in map_element.members
        if not m.is_default and not m.is_static and m.name not in object_names and consumes(m)
    )
