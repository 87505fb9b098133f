"""
Pytest configuration and shared fixtures for automap tests.

This module provides common test fixtures for declarations, markers,
type registries and extension contexts used across the test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from automap.codegen import ExtensionContext, MapExtension, PropertyResolver
from automap.model import (
    Marker,
    PropertyElement,
    TypeParameter,
    TypeRegistry,
    ValueTypeDeclaration,
    parse_type,
)
from automap.utils.config import set_config


SERIALIZED_NAME = "com.google.gson.annotations.SerializedName"
JSON = "com.squareup.moshi.Json"
NULLABLE = "javax.annotation.Nullable"
MAP_KEY = "automap.annotation.MapKey"


def make_property(name, return_type="java.lang.String", *markers, method=None):
    """Build an accessor with the given markers."""
    return PropertyElement(name, method or name, return_type, tuple(markers))


def make_declaration(qualified_name, properties=(), supertype="java.util.Map<String, Object>",
                     type_parameters=()):
    """Build a value type that declares ``supertype``."""
    return ValueTypeDeclaration(
        qualified_name=qualified_name,
        type_parameters=tuple(TypeParameter(p) for p in type_parameters),
        supertypes=(parse_type(supertype),) if supertype else (),
        properties=tuple(properties),
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep tests independent of any process-wide configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def registry():
    """A registry with the JDK builtins."""
    return TypeRegistry.with_builtins()


@pytest.fixture
def resolver():
    """A resolver with the default map-key annotation."""
    return PropertyResolver()


@pytest.fixture
def person_declaration():
    """``name: String`` without markers and ``id: Integer`` with @SerializedName."""
    return make_declaration(
        "com.example.Person",
        [
            make_property("name", "java.lang.String"),
            make_property("id", "java.lang.Integer", Marker.of(SERIALIZED_NAME, value="identifier")),
        ],
    )


@pytest.fixture
def person_context(person_declaration, registry):
    """Extension context for the person declaration."""
    return ExtensionContext(person_declaration, registry)


@pytest.fixture
def extension():
    """A map extension using the packaged template."""
    return MapExtension()
