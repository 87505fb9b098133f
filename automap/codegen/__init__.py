"""
Map Class Generation.

This package turns a value-type declaration into the source of a class
that implements ``Map<String, Object>`` over the declaration's properties.

Architecture Overview:
- types.py: request, descriptor and result types
- applicability.py: the Map<String, Object> gate and consumed members
- resolver.py: per-property storage key and nullability resolution
- descriptor.py: ordered class descriptor assembly
- templates/: Jinja2 rendering of the class template
- extension.py: the host-facing MapExtension
"""

from .types import (
    PropertySpec,
    ClassDescriptor,
    ExtensionContext,
    GenerationRequest,
    Generated,
    Failed,
    GenerationResult,
    ClassRenderer,
)
from .applicability import (
    CONSUMED_METHOD_NAMES,
    applicable,
    consumed_methods,
    map_type,
)
from .resolver import KEY_MARKERS, PropertyResolver, resolve
from .descriptor import DescriptorBuilder, type_parameters_of
from .templates import (
    JinjaTemplateRenderer,
    MapClassRenderer,
    create_class_renderer,
    get_class_renderer,
)
from .extension import MapExtension

__all__ = [
    "PropertySpec",
    "ClassDescriptor",
    "ExtensionContext",
    "GenerationRequest",
    "Generated",
    "Failed",
    "GenerationResult",
    "ClassRenderer",
    "CONSUMED_METHOD_NAMES",
    "applicable",
    "consumed_methods",
    "map_type",
    "KEY_MARKERS",
    "PropertyResolver",
    "resolve",
    "DescriptorBuilder",
    "type_parameters_of",
    "JinjaTemplateRenderer",
    "MapClassRenderer",
    "create_class_renderer",
    "get_class_renderer",
    "MapExtension",
]
