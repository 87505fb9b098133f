"""
Type Registry.

The registry is the host's type universe as far as automap is concerned:
a lookup of type elements by name and an assignability check that follows
supertypes with generic substitution. ``TypeRegistry.with_builtins()``
knows the handful of JDK types the map extension needs.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .elements import (
    DeclaredType,
    MethodElement,
    TypeElement,
    TypeParameter,
    parse_type,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

OBJECT = "java.lang.Object"
STRING = "java.lang.String"
MAP = "java.util.Map"
ABSTRACT_MAP = "java.util.AbstractMap"
HASH_MAP = "java.util.HashMap"

TypeLike = Union[str, DeclaredType]


def _method(name: str, parameters: Iterable[str] = (), return_type: str = "void",
            *modifiers: str) -> MethodElement:
    return MethodElement(name, tuple(parameters), return_type, frozenset(modifiers))


def _builtin_elements() -> List[TypeElement]:
    object_element = TypeElement(
        OBJECT,
        members=(
            _method("equals", ["java.lang.Object"], "boolean"),
            _method("hashCode", [], "int"),
            _method("toString", [], "java.lang.String"),
            _method("getClass", [], "java.lang.Class<?>"),
        ),
    )
    string_element = TypeElement(STRING, supertypes=(DeclaredType(OBJECT),))

    k_v = (TypeParameter("K"), TypeParameter("V"))
    map_element = TypeElement(
        MAP,
        type_parameters=k_v,
        members=(
            _method("size", [], "int", "abstract"),
            _method("isEmpty", [], "boolean", "abstract"),
            _method("containsKey", ["java.lang.Object"], "boolean", "abstract"),
            _method("containsValue", ["java.lang.Object"], "boolean", "abstract"),
            _method("get", ["java.lang.Object"], "V", "abstract"),
            _method("put", ["K", "V"], "V", "abstract"),
            _method("remove", ["java.lang.Object"], "V", "abstract"),
            _method("putAll", ["java.util.Map<? extends K, ? extends V>"], "void", "abstract"),
            _method("clear", [], "void", "abstract"),
            _method("keySet", [], "java.util.Set<K>", "abstract"),
            _method("values", [], "java.util.Collection<V>", "abstract"),
            _method("entrySet", [], "java.util.Set<java.util.Map.Entry<K, V>>", "abstract"),
            _method("equals", ["java.lang.Object"], "boolean", "abstract"),
            _method("hashCode", [], "int", "abstract"),
            _method("getOrDefault", ["java.lang.Object", "V"], "V", "default"),
            _method("forEach", ["java.util.function.BiConsumer<? super K, ? super V>"], "void", "default"),
            _method("replaceAll", ["java.util.function.BiFunction<? super K, ? super V, ? extends V>"],
                    "void", "default"),
            _method("putIfAbsent", ["K", "V"], "V", "default"),
            _method("remove", ["java.lang.Object", "java.lang.Object"], "boolean", "default"),
            _method("replace", ["K", "V", "V"], "boolean", "default"),
            _method("replace", ["K", "V"], "V", "default"),
            _method("computeIfAbsent", ["K", "java.util.function.Function<? super K, ? extends V>"],
                    "V", "default"),
            _method("computeIfPresent",
                    ["K", "java.util.function.BiFunction<? super K, ? super V, ? extends V>"], "V", "default"),
            _method("compute", ["K", "java.util.function.BiFunction<? super K, ? super V, ? extends V>"],
                    "V", "default"),
            _method("merge", ["K", "V", "java.util.function.BiFunction<? super V, ? super V, ? extends V>"],
                    "V", "default"),
            _method("of", [], "java.util.Map<K, V>", "static"),
            _method("ofEntries", ["java.util.Map.Entry<? extends K, ? extends V>[]"],
                    "java.util.Map<K, V>", "static"),
            _method("entry", ["K", "V"], "java.util.Map.Entry<K, V>", "static"),
            _method("copyOf", ["java.util.Map<? extends K, ? extends V>"], "java.util.Map<K, V>", "static"),
        ),
    )
    abstract_map_element = TypeElement(
        ABSTRACT_MAP,
        type_parameters=k_v,
        supertypes=(DeclaredType(OBJECT), parse_type("java.util.Map<K, V>")),
    )
    hash_map_element = TypeElement(
        HASH_MAP,
        type_parameters=k_v,
        supertypes=(parse_type("java.util.AbstractMap<K, V>"), parse_type("java.util.Map<K, V>")),
    )
    return [object_element, string_element, map_element, abstract_map_element, hash_map_element]


class TypeRegistry:
    """Name-indexed collection of type elements with an assignability check."""

    def __init__(self, elements: Iterable[TypeElement] = ()):
        self._elements: Dict[str, TypeElement] = {}
        self._by_simple_name: Dict[str, List[str]] = {}
        for element in elements:
            self.register(element)

    @classmethod
    def with_builtins(cls, elements: Iterable[TypeElement] = ()) -> 'TypeRegistry':
        """Create a registry that already knows Object, String and the Map types."""
        registry = cls(_builtin_elements())
        for element in elements:
            registry.register(element)
        return registry

    def register(self, element: TypeElement) -> TypeElement:
        """Add or replace an element."""
        if element.qualified_name in self._elements:
            logger.debug(f"Replacing registered type {element.qualified_name}")
        else:
            self._by_simple_name.setdefault(element.simple_name, []).append(element.qualified_name)
        self._elements[element.qualified_name] = element
        return element

    def __contains__(self, name: str) -> bool:
        return self.resolve_name(name) in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def get_type_element(self, name: str) -> Optional[TypeElement]:
        return self._elements.get(self.resolve_name(name))

    def resolve_name(self, name: str) -> str:
        """
        Resolve a possibly simple name to a registered qualified name.

        Exact matches win, then the implicit ``java.lang`` import, then a
        unique simple-name match. Unknown names are returned unchanged.
        """
        if name in self._elements:
            return name
        implicit = f"java.lang.{name}"
        if implicit in self._elements:
            return implicit
        candidates = self._by_simple_name.get(name, [])
        if len(candidates) == 1:
            return candidates[0]
        return name

    def normalize(self, type_ref: DeclaredType) -> DeclaredType:
        """Resolve every name in ``type_ref`` to its qualified form."""
        name = type_ref.name if type_ref.is_wildcard else self.resolve_name(type_ref.name)
        return DeclaredType(
            name,
            tuple(self.normalize(a) for a in type_ref.arguments),
            type_ref.bound,
            type_ref.dimensions,
        )

    def get_declared_type(self, name: str, *arguments: TypeLike) -> DeclaredType:
        """Build ``name<arguments...>`` with all names resolved."""
        args = tuple(parse_type(a) if isinstance(a, str) else a for a in arguments)
        return self.normalize(DeclaredType(name, args))

    def supertypes_of(self, type_ref: DeclaredType) -> Tuple[DeclaredType, ...]:
        """
        Direct supertypes of ``type_ref`` with its type arguments substituted.

        Supertypes of a raw type are raw.
        """
        element = self.get_type_element(type_ref.name)
        if element is None or type_ref.dimensions:
            return ()
        if type_ref.is_raw and element.type_parameters:
            return tuple(DeclaredType(self.resolve_name(s.name)) for s in element.supertypes)
        bindings = {}
        if len(type_ref.arguments) == len(element.type_parameters):
            bindings = {p.name: a for p, a in zip(element.type_parameters, type_ref.arguments)}
        return tuple(self.normalize(_substitute(s, bindings)) for s in element.supertypes)

    def is_assignable(self, source: Union[DeclaredType, TypeElement], target: DeclaredType) -> bool:
        """
        Check whether a value of ``source`` can be assigned to ``target``.

        ``source`` may be a type element, in which case its own type
        variables stay unbound. Generic arguments are compared invariantly
        unless the target uses a wildcard.
        """
        target = self.normalize(target)
        if target.name == OBJECT and not target.dimensions:
            return True

        if isinstance(source, TypeElement):
            start = source.as_type()
            queue = deque([start])
            queue.extend(self.normalize(s) for s in source.supertypes)
        else:
            queue = deque([self.normalize(source)])

        seen = set()
        while queue:
            current = queue.popleft()
            key = str(current)
            if key in seen:
                continue
            seen.add(key)
            if self._matches(current, target):
                return True
            if isinstance(source, TypeElement) and current.name == source.qualified_name:
                # The declaration's own supertypes were queued above
                continue
            queue.extend(self.supertypes_of(current))
        return False

    def is_same_type(self, left: DeclaredType, right: DeclaredType) -> bool:
        return self.normalize(left) == self.normalize(right)

    def _matches(self, source: DeclaredType, target: DeclaredType) -> bool:
        if source.name != target.name or source.dimensions != target.dimensions:
            return False
        if source.is_raw or target.is_raw:
            # Unchecked conversion
            return True
        if len(source.arguments) != len(target.arguments):
            return False
        return all(self._contains(t, s) for s, t in zip(source.arguments, target.arguments))

    def _contains(self, target_arg: DeclaredType, source_arg: DeclaredType) -> bool:
        if not target_arg.is_wildcard:
            return source_arg == target_arg
        if not target_arg.bound or not target_arg.arguments:
            return True
        if source_arg.is_wildcard:
            return False
        bound = target_arg.arguments[0]
        if target_arg.bound == "extends":
            return self.is_assignable(source_arg, bound)
        return self.is_assignable(bound, source_arg)


def _substitute(type_ref: DeclaredType, bindings: Dict[str, DeclaredType]) -> DeclaredType:
    if not type_ref.arguments and type_ref.name in bindings and not type_ref.dimensions:
        return bindings[type_ref.name]
    return DeclaredType(
        type_ref.name,
        tuple(_substitute(a, bindings) for a in type_ref.arguments),
        type_ref.bound,
        type_ref.dimensions,
    )
