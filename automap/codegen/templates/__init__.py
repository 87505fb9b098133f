"""
Template Rendering System.

This module provides template-based code generation using Jinja2 templates.
It includes:
- JinjaTemplateRenderer: Jinja2 engine with Java string filters
- MapClassRenderer: evaluates the map class template against a descriptor

Templates live under java/.
"""

from .renderer import (
    DEFAULT_TEMPLATE_DIR,
    JinjaTemplateRenderer,
    MapClassRenderer,
    create_class_renderer,
    get_class_renderer,
    render_template,
)

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "JinjaTemplateRenderer",
    "MapClassRenderer",
    "create_class_renderer",
    "get_class_renderer",
    "render_template",
]
