"""
String Manipulation Utilities for automap.

Helpers for turning resolved metadata into Java source fragments.
"""

from __future__ import annotations

from typing import Iterable

_JAVA_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\b': '\\b',
    '\f': '\\f',
}


def escape_java_string(text: str) -> str:
    """
    Escape text for use inside a Java string literal.

    Args:
        text: Raw string

    Returns:
        Escaped string without the surrounding quotes
    """
    out = []
    for ch in text:
        if ch in _JAVA_ESCAPES:
            out.append(_JAVA_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def java_string_literal(text: str) -> str:
    """Return ``text`` as a quoted Java string literal."""
    return f'"{escape_java_string(text)}"'


def join_with_commas(items: Iterable[str]) -> str:
    """Join items with commas and proper spacing."""
    return ", ".join(items)


def format_type_parameters(names: Iterable[str]) -> str:
    """
    Format generic parameter names as ``<A, B>``.

    Args:
        names: Parameter names in declaration order

    Returns:
        Bracketed list, or an empty string when there are no names
    """
    names = list(names)
    if not names:
        return ""
    return f"<{join_with_commas(names)}>"


def is_blank(text) -> bool:
    """True for None, empty and whitespace-only strings."""
    return text is None or not str(text).strip()


def simple_name(qualified_name: str) -> str:
    """Return the last dotted component of a qualified name."""
    return qualified_name.rsplit(".", 1)[-1]


def package_of(qualified_name: str) -> str:
    """Return everything before the last dot, or an empty string."""
    if "." not in qualified_name:
        return ""
    return qualified_name.rsplit(".", 1)[0]
