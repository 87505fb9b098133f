"""
Unit tests for template rendering.

Tests the Jinja2 engine wrapper, its Java filters, the class renderer's
lazy template loading and failure reporting.
"""

import pytest

from automap.codegen.templates import (
    DEFAULT_TEMPLATE_DIR,
    JinjaTemplateRenderer,
    MapClassRenderer,
    create_class_renderer,
    get_class_renderer,
)
from automap.codegen.types import ClassDescriptor, PropertySpec
from automap.utils.config import AutoMapConfig
from automap.utils.exceptions import TemplateRenderError


def _descriptor(properties=(), package_name="com.example", type_parameters="", is_final=True):
    return ClassDescriptor(
        package_name=package_name,
        class_name="AutoValue_Person",
        type_parameters=type_parameters,
        superclass_name="$AutoValue_Person",
        is_final=is_final,
        properties=tuple(properties),
    )


class TestJinjaTemplateRenderer:
    """Tests for the Jinja2 engine wrapper."""

    def test_default_template_dir(self):
        renderer = JinjaTemplateRenderer()
        assert str(renderer.template_dir) == DEFAULT_TEMPLATE_DIR

    def test_render_string(self):
        renderer = JinjaTemplateRenderer()
        assert renderer.render("Hello {{ name }}", {"name": "map"}) == "Hello map"

    def test_java_string_filter(self):
        renderer = JinjaTemplateRenderer()
        assert renderer.render('{{ key | java_string }}', {"key": 'a"b\\c\n'}) == '"a\\"b\\\\c\\n"'

    def test_only_java_string_filter_added(self):
        renderer = JinjaTemplateRenderer()
        with pytest.raises(TemplateRenderError):
            renderer.render("{{ items | join_commas }}", {"items": ["a", "b"]})

    def test_undefined_variable_fails(self):
        renderer = JinjaTemplateRenderer()
        with pytest.raises(TemplateRenderError):
            renderer.render("{{ missing }}", {})

    def test_syntax_error_fails(self):
        renderer = JinjaTemplateRenderer()
        with pytest.raises(TemplateRenderError):
            renderer.render("{% for %}", {})

    def test_missing_template_file(self, tmp_path):
        renderer = JinjaTemplateRenderer(str(tmp_path))
        with pytest.raises(TemplateRenderError) as info:
            renderer.render_file("absent.j2", {})
        assert info.value.template_name == "absent.j2"

    def test_undecodable_template_file(self, tmp_path):
        (tmp_path / "latin.j2").write_bytes(b"\xff\xfe{{ className }}")
        renderer = JinjaTemplateRenderer(str(tmp_path))

        with pytest.raises(TemplateRenderError) as info:
            renderer.get_template("latin.j2")

        assert info.value.template_name == "latin.j2"
        assert isinstance(info.value.__cause__, UnicodeDecodeError)

    def test_render_file(self, tmp_path):
        (tmp_path / "greeting.j2").write_text("class {{ className }} {}\n")
        renderer = JinjaTemplateRenderer(str(tmp_path))
        assert renderer.render_file("greeting.j2", {"className": "A"}) == "class A {}\n"


class TestMapClassRenderer:
    """Tests for the fixed class template renderer."""

    def test_renders_packaged_template(self):
        source = MapClassRenderer().render(_descriptor([PropertySpec("name", "name", "String", "name()")]))

        assert "package com.example;" in source
        assert "final class AutoValue_Person extends $AutoValue_Person {" in source
        assert '$entries.put("name", name());' in source

    def test_template_loaded_once(self, tmp_path):
        template = tmp_path / "map.j2"
        template.write_text("{{ className }}")
        renderer = MapClassRenderer(JinjaTemplateRenderer(str(tmp_path)), "map.j2")

        assert renderer.render(_descriptor()) == "AutoValue_Person"
        template.unlink()
        # Compiled template is reused after the file is gone
        assert renderer.render(_descriptor()) == "AutoValue_Person"

    def test_missing_template(self, tmp_path):
        renderer = MapClassRenderer(JinjaTemplateRenderer(str(tmp_path)), "missing.j2")
        with pytest.raises(TemplateRenderError):
            renderer.render(_descriptor())

    def test_malformed_template(self, tmp_path):
        (tmp_path / "broken.j2").write_text("{% if className %}unterminated")
        renderer = MapClassRenderer(JinjaTemplateRenderer(str(tmp_path)), "broken.j2")
        with pytest.raises(TemplateRenderError):
            renderer.render(_descriptor())

    def test_unknown_variable(self, tmp_path):
        (tmp_path / "unknown.j2").write_text("{{ className }} {{ superclass }}")
        renderer = MapClassRenderer(JinjaTemplateRenderer(str(tmp_path)), "unknown.j2")
        with pytest.raises(TemplateRenderError):
            renderer.render(_descriptor())

    def test_evaluation_error_wrapped(self, tmp_path):
        (tmp_path / "divide.j2").write_text("{{ 1 // 0 }}")
        renderer = MapClassRenderer(JinjaTemplateRenderer(str(tmp_path)), "divide.j2")
        with pytest.raises(TemplateRenderError) as info:
            renderer.render(_descriptor())
        assert "ZeroDivisionError" in str(info.value)


class TestRendererFactories:
    """Tests for renderer construction helpers."""

    def test_shared_renderer(self):
        assert get_class_renderer() is get_class_renderer()

    def test_create_from_config(self, tmp_path):
        (tmp_path / "custom.j2").write_text("custom {{ className }}")
        config_file = tmp_path / "automap.json"
        config_file.write_text(
            '{"template": {"template_dir": "%s", "template_name": "custom.j2"}}' % tmp_path.as_posix()
        )
        renderer = create_class_renderer(AutoMapConfig(str(config_file)))

        assert renderer.template_name == "custom.j2"
        assert renderer.render(_descriptor()) == "custom AutoValue_Person"

    def test_create_without_config(self):
        assert create_class_renderer().template_name == "auto_value_map.java.j2"
