"""
Property Resolution.

Turns one declared accessor into a ``PropertySpec``: the storage key the
generated map uses, the accessor's type and invocation text, and the
nullability annotation to re-emit.

Key selection works in three layers:

1. the property name;
2. the key-bearing markers (``@Json(name=...)``, ``@SerializedName``,
   Retrofit-style ``@Field``/``@Header``/``@Part``/``@Query``), scanned in
   host order where the last non-blank value seen wins;
3. the dedicated map-key marker, which always wins when present.

A blank result at any layer falls through to the property name.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from .types import PropertySpec
from ..model.elements import Marker, PropertyElement
from ..utils.config import DEFAULT_MAP_KEY_ANNOTATION
from ..utils.logging import AutoMapLogger
from ..utils.string_utils import is_blank, simple_name

logger = AutoMapLogger(__name__)

KeyExtractor = Callable[[Marker], Optional[str]]

NULLABLE_MARKERS = frozenset({"Nullable"})


def attribute_reader(attribute: str) -> KeyExtractor:
    """
    Build an extractor returning the trimmed ``attribute`` of a marker.

    Missing and blank values yield None.
    """
    def read(marker: Marker) -> Optional[str]:
        value = marker.attribute(attribute)
        if is_blank(value):
            return None
        return str(value).strip()

    read.__name__ = f"read_{attribute}"
    return read


KEY_MARKERS: Mapping[str, KeyExtractor] = {
    "Json": attribute_reader("name"),
    "Field": attribute_reader("value"),
    "Header": attribute_reader("value"),
    "Part": attribute_reader("value"),
    "Query": attribute_reader("value"),
    "SerializedName": attribute_reader("value"),
}


def nullable_usage(marker: Marker) -> str:
    """The nullability annotation as it is re-emitted before a parameter."""
    return f"{marker.usage} "


class PropertyResolver:
    """Resolves accessors into property specs."""

    def __init__(
        self,
        map_key_annotation: str = DEFAULT_MAP_KEY_ANNOTATION,
        key_markers: Optional[Mapping[str, KeyExtractor]] = None,
    ):
        self._map_key_annotation = map_key_annotation
        self._map_key_simple_name = simple_name(map_key_annotation)
        self._key_markers: Dict[str, KeyExtractor] = dict(KEY_MARKERS if key_markers is None else key_markers)

    @property
    def map_key_annotation(self) -> str:
        return self._map_key_annotation

    def is_map_key(self, marker: Marker) -> bool:
        if marker.qualified_name:
            return marker.qualified_name == self._map_key_annotation
        return marker.simple_name == self._map_key_simple_name

    def resolve(self, property_name: str, accessor: PropertyElement) -> PropertySpec:
        """
        Resolve one accessor.

        Args:
            property_name: The declared property name
            accessor: The abstract accessor backing the property

        Returns:
            The resolved property; its key is never blank
        """
        nullable = ""
        pending: Optional[str] = None
        source = None
        map_key: Optional[Marker] = None

        for marker in accessor.markers:
            if marker.simple_name in NULLABLE_MARKERS:
                nullable = nullable_usage(marker)
                continue
            if self.is_map_key(marker):
                map_key = marker
                continue
            extract = self._key_markers.get(marker.simple_name)
            if extract is None:
                continue
            override = extract(marker)
            if override is not None:
                # Later markers replace earlier ones
                pending = override
                source = marker.simple_name

        if map_key is not None:
            pending = str(map_key.attribute("value") or "").strip()
            source = map_key.simple_name

        key = property_name if is_blank(pending) else pending
        if key != property_name:
            logger.log_key_override(property_name, key, source)

        return PropertySpec(
            key=key,
            name=property_name,
            type=accessor.return_type,
            value_expr=accessor.invocation,
            nullable_marker=nullable,
        )


_default_resolver = PropertyResolver()


def resolve(property_name: str, accessor: PropertyElement) -> PropertySpec:
    """Resolve with the default map-key annotation."""
    return _default_resolver.resolve(property_name, accessor)
