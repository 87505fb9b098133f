"""
automap: Map<String, Object> implementations for value types

A code-generation extension for annotation-processing hosts. Given a
value type that declares ``Map<String, Object>`` as a supertype, automap
generates a class that backs the declared accessors with one immutable
key/value store, using serialization annotations to pick storage keys.

Usage:
    from automap import MapExtension, ExtensionContext, TypeRegistry, load_declaration

    declaration = load_declaration("person.yaml")
    context = ExtensionContext(declaration, TypeRegistry.with_builtins())
    extension = MapExtension()
    if extension.applicable(context):
        result = extension.generate_class(context, "AutoValue_Person", "$AutoValue_Person", True)
"""

__version__ = "0.1.0"
__author__ = "automap Team"
__email__ = "automap@example.com"

from .codegen import (
    MapExtension,
    ExtensionContext,
    GenerationRequest,
    PropertySpec,
    ClassDescriptor,
    Generated,
    Failed,
    PropertyResolver,
    DescriptorBuilder,
    MapClassRenderer,
)
from .model import (
    TypeRegistry,
    ValueTypeDeclaration,
    PropertyElement,
    Marker,
    load_declaration,
    declaration_from_dict,
)
from .utils import (
    AutoMapConfig,
    AutoMapError,
    GenerationError,
    TemplateRenderError,
    get_config,
)

__all__ = [
    "MapExtension",
    "ExtensionContext",
    "GenerationRequest",
    "PropertySpec",
    "ClassDescriptor",
    "Generated",
    "Failed",
    "PropertyResolver",
    "DescriptorBuilder",
    "MapClassRenderer",
    "TypeRegistry",
    "ValueTypeDeclaration",
    "PropertyElement",
    "Marker",
    "load_declaration",
    "declaration_from_dict",
    "AutoMapConfig",
    "AutoMapError",
    "GenerationError",
    "TemplateRenderError",
    "get_config",
]
