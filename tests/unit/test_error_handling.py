"""
Unit tests for the exception hierarchy and result types.
"""

import pytest

from automap.codegen.types import Failed, Generated
from automap.utils.exceptions import (
    AutoMapError,
    DeclarationError,
    GenerationError,
    TemplateRenderError,
    TypeParseError,
)


class TestAutoMapExceptions:
    """Test cases for custom exception classes."""

    def test_automap_error_basic(self):
        error = AutoMapError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_automap_error_with_details(self):
        error = AutoMapError("Test error", {"key1": "value1", "key2": 42})

        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_template_render_error(self):
        error = TemplateRenderError("Template missing", "auto_value_map.java.j2")

        assert error.template_name == "auto_value_map.java.j2"
        assert error.details == {"template": "auto_value_map.java.j2"}
        assert isinstance(error, AutoMapError)

    def test_generation_error(self):
        error = GenerationError("Failed", "AutoValue_Person")
        assert error.class_name == "AutoValue_Person"
        assert "class_name=AutoValue_Person" in str(error)

    def test_declaration_error_without_source(self):
        error = DeclarationError("Missing name")
        assert str(error) == "Missing name"
        assert error.source is None

    def test_type_parse_error(self):
        error = TypeParseError("Unexpected ';'", "Map<A;B>", 5)
        assert error.text == "Map<A;B>"
        assert error.position == 5


class TestResults:
    """Test cases for Generated and Failed."""

    def test_generated(self):
        result = Generated("class A {}")
        assert result.ok
        assert result.unwrap() == "class A {}"

    def test_failed(self):
        cause = TemplateRenderError("boom", "t.j2")
        result = Failed("boom", "A", cause)

        assert not result.ok
        with pytest.raises(GenerationError) as info:
            result.unwrap()
        assert info.value.__cause__ is cause
        assert info.value.class_name == "A"

    def test_failed_without_cause(self):
        with pytest.raises(GenerationError):
            Failed("no template").unwrap()
