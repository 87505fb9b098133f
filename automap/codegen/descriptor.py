"""
Class Descriptor Builder.

Collects the inputs of one generated class from a generation request.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .resolver import PropertyResolver
from .types import ClassDescriptor, ExtensionContext, GenerationRequest, PropertySpec
from ..utils.string_utils import format_type_parameters


def type_parameters_of(context: ExtensionContext) -> str:
    """Render the value type's generic parameter names, e.g. ``<T, U>``."""
    return format_type_parameters(p.name for p in context.declaration.type_parameters)


class DescriptorBuilder:
    """Builds ``ClassDescriptor`` objects, resolving properties in order."""

    def __init__(self, resolver: Optional[PropertyResolver] = None):
        self._resolver = resolver or PropertyResolver()

    def build_properties(self, context: ExtensionContext) -> Tuple[PropertySpec, ...]:
        return tuple(
            self._resolver.resolve(name, accessor)
            for name, accessor in context.properties.items()
        )

    def build(self, request: GenerationRequest) -> ClassDescriptor:
        context = request.context
        return ClassDescriptor(
            package_name=context.package_name,
            class_name=request.class_name,
            type_parameters=type_parameters_of(context),
            superclass_name=request.class_to_extend,
            is_final=request.is_final,
            properties=self.build_properties(context),
        )
