"""
Host Metadata Elements.

Immutable, read-only descriptions of what the host compiler knows about
a value-type declaration: type references, type elements with their
members and supertypes, and accessors with the markers attached to them.
Nothing in this module talks to a compiler; hosts translate their own
reflection objects into these types.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from ..utils.exceptions import TypeParseError
from ..utils.string_utils import package_of, simple_name

WILDCARD = "?"


@dataclass(frozen=True)
class DeclaredType:
    """A possibly parameterized reference to a type or type variable."""
    name: str
    arguments: Tuple['DeclaredType', ...] = ()
    bound: str = ""  # "extends" or "super" for bounded wildcards
    dimensions: int = 0

    @property
    def is_raw(self) -> bool:
        return not self.arguments

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD

    def __str__(self) -> str:
        if self.is_wildcard:
            text = WILDCARD
            if self.bound and self.arguments:
                text = f"{WILDCARD} {self.bound} {self.arguments[0]}"
        elif self.arguments:
            text = f"{self.name}<{', '.join(str(a) for a in self.arguments)}>"
        else:
            text = self.name
        return text + "[]" * self.dimensions


_TOKEN_RE = re.compile(r"\s*(?:([A-Za-z_$][\w$]*)|(.))")


def _tokenize(text: str) -> List[Tuple[str, int]]:
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            # Only trailing whitespace is left
            break
        token = match.group(1) or match.group(2)
        if token is None:
            break
        tokens.append((token, match.start(1) if match.group(1) else match.start(2)))
        pos = match.end()
    return tokens


class _TypeParser:
    """Recursive-descent parser for Java-like type expressions."""

    def __init__(self, text: str):
        self._text = text
        self._tokens = _tokenize(text)
        self._index = 0

    def _peek(self) -> Optional[str]:
        if self._index < len(self._tokens):
            return self._tokens[self._index][0]
        return None

    def _position(self) -> int:
        if self._index < len(self._tokens):
            return self._tokens[self._index][1]
        return len(self._text)

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TypeParseError("Unexpected end of type expression", self._text, self._position())
        self._index += 1
        return token

    def _expect(self, expected: str) -> None:
        position = self._position()
        token = self._next()
        if token != expected:
            raise TypeParseError(f"Expected '{expected}' but found '{token}'", self._text, position)

    def parse(self) -> DeclaredType:
        result = self._parse_type()
        if self._peek() is not None:
            raise TypeParseError(f"Unexpected '{self._peek()}'", self._text, self._position())
        return result

    def _parse_type(self) -> DeclaredType:
        if self._peek() == WILDCARD:
            self._next()
            if self._peek() in ("extends", "super"):
                bound = self._next()
                return DeclaredType(WILDCARD, (self._parse_type(),), bound)
            return DeclaredType(WILDCARD)

        name = self._parse_name()
        arguments: Tuple[DeclaredType, ...] = ()
        if self._peek() == "<":
            self._next()
            args = [self._parse_type()]
            while self._peek() == ",":
                self._next()
                args.append(self._parse_type())
            self._expect(">")
            arguments = tuple(args)

        dimensions = 0
        while self._peek() == "[":
            self._next()
            self._expect("]")
            dimensions += 1
        return DeclaredType(name, arguments, dimensions=dimensions)

    def _parse_name(self) -> str:
        position = self._position()
        token = self._next()
        if not (token[0].isalpha() or token[0] in "_$"):
            raise TypeParseError(f"Expected a type name but found '{token}'", self._text, position)
        parts = [token]
        while self._peek() == ".":
            self._next()
            position = self._position()
            part = self._next()
            if not (part[0].isalpha() or part[0] in "_$"):
                raise TypeParseError(f"Expected an identifier but found '{part}'", self._text, position)
            parts.append(part)
        return ".".join(parts)


def parse_type(text: str) -> DeclaredType:
    """
    Parse a type expression such as ``java.util.Map<String, List<T>>``.

    Wildcards (``?``, ``? extends X``, ``? super X``) and array
    suffixes are supported.

    Raises:
        TypeParseError: if the expression is malformed
    """
    if not text or not text.strip():
        raise TypeParseError("Empty type expression", text or "")
    return _TypeParser(text).parse()


@dataclass(frozen=True)
class TypeParameter:
    """A generic parameter of a type element, e.g. ``T extends Number``."""
    name: str
    bounds: Tuple[DeclaredType, ...] = ()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MethodElement:
    """A member method of a type element."""
    name: str
    parameters: Tuple[str, ...] = ()
    return_type: str = "void"
    modifiers: FrozenSet[str] = frozenset()

    @property
    def is_default(self) -> bool:
        return "default" in self.modifiers

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers

    def __str__(self) -> str:
        return f"{self.name}({','.join(self.parameters)})"


@dataclass(frozen=True)
class TypeElement:
    """A class or interface known to the host."""
    qualified_name: str
    type_parameters: Tuple[TypeParameter, ...] = ()
    supertypes: Tuple[DeclaredType, ...] = ()
    members: Tuple[MethodElement, ...] = ()

    @property
    def simple_name(self) -> str:
        return simple_name(self.qualified_name)

    @property
    def package_name(self) -> str:
        return package_of(self.qualified_name)

    def as_type(self) -> DeclaredType:
        """The element's type as seen from inside its own declaration."""
        return DeclaredType(
            self.qualified_name,
            tuple(DeclaredType(p.name) for p in self.type_parameters),
        )


@dataclass(frozen=True)
class Marker:
    """An annotation usage attached to an accessor."""
    simple_name: str
    qualified_name: str = ""
    attributes: Dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def of(cls, qualified_name: str, **attributes: Any) -> 'Marker':
        """Build a marker from its qualified name and attribute values."""
        return cls(simple_name(qualified_name), qualified_name, dict(attributes))

    @property
    def usage(self) -> str:
        """The annotation as it would be written in source, without arguments."""
        return f"@{self.qualified_name or self.simple_name}"

    def attribute(self, name: str) -> Optional[Any]:
        """Return the explicitly set value of ``name``, or None."""
        return self.attributes.get(name)


@dataclass(frozen=True)
class PropertyElement:
    """One abstract accessor of a value type."""
    name: str
    method_name: str
    return_type: str
    markers: Tuple[Marker, ...] = ()

    @property
    def invocation(self) -> str:
        """Source text that calls the accessor on ``this``."""
        return f"{self.method_name}()"


@dataclass(frozen=True)
class ValueTypeDeclaration(TypeElement):
    """A value type together with its declared properties in source order."""
    properties: Tuple[PropertyElement, ...] = ()

    def property_map(self) -> Dict[str, PropertyElement]:
        """Ordered mapping of property name to accessor."""
        return {p.name: p for p in self.properties}
