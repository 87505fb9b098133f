"""
Template Rendering Engine.

This module provides template-based code generation using Jinja2 templates.
``JinjaTemplateRenderer`` is the general engine with the Java string
filter; ``MapClassRenderer`` evaluates the one fixed map class template
against a ``ClassDescriptor``.
"""

from __future__ import annotations

from typing import Dict, Any, Optional
from pathlib import Path
import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from ..types import ClassDescriptor
from ...utils.config import DEFAULT_TEMPLATE_NAME, AutoMapConfig
from ...utils.exceptions import TemplateRenderError
from ...utils.logging import get_logger
from ...utils.string_utils import java_string_literal

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "java")


class JinjaTemplateRenderer:
    """Jinja2-based template renderer for Java source generation."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the template renderer."""
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR

        self._template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

        self._setup_custom_filters()

    @property
    def template_dir(self) -> Path:
        return self._template_dir

    def _setup_custom_filters(self) -> None:
        """Set up custom Jinja2 filters for Java generation."""
        self._env.filters["java_string"] = java_string_literal

    def get_template(self, template_name: str) -> Template:
        """Load and compile a template file."""
        try:
            return self._env.get_template(template_name)
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to load template: {e}", template_name) from e
        except OSError as e:
            raise TemplateRenderError(f"Failed to read template: {e}", template_name) from e
        except Exception as e:
            raise TemplateRenderError(
                f"Failed to load template: {type(e).__name__}: {e}", template_name
            ) from e

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template_obj = self._env.from_string(template)
            return template_obj.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Template rendering failed: {e}") from e

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        return render_template(self.get_template(template_path), context, template_path)


def render_template(template: Template, context: Dict[str, Any], template_name: str = "") -> str:
    """
    Evaluate a compiled template.

    Any failure is raised as ``TemplateRenderError``; the caller never sees
    partially rendered text.
    """
    try:
        return template.render(**context)
    except TemplateError as e:
        raise TemplateRenderError(f"Template evaluation failed: {e}", template_name) from e
    except Exception as e:
        raise TemplateRenderError(
            f"Template evaluation failed: {type(e).__name__}: {e}", template_name
        ) from e


class MapClassRenderer:
    """
    Renders the map implementation class for a descriptor.

    The template is compiled on first use and reused read-only afterwards.
    """

    def __init__(
        self,
        renderer: Optional[JinjaTemplateRenderer] = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ):
        self._renderer = renderer or JinjaTemplateRenderer()
        self._template_name = template_name
        self._template: Optional[Template] = None

    @property
    def template_name(self) -> str:
        return self._template_name

    def _load(self) -> Template:
        if self._template is None:
            self._template = self._renderer.get_template(self._template_name)
            logger.debug(f"Loaded template {self._template_name} from {self._renderer.template_dir}")
        return self._template

    def render(self, descriptor: ClassDescriptor) -> str:
        """Render the class described by ``descriptor``."""
        return render_template(self._load(), descriptor.to_template_vars(), self._template_name)


def create_class_renderer(config: Optional[AutoMapConfig] = None) -> MapClassRenderer:
    """Create a class renderer from configuration."""
    if config is None:
        return MapClassRenderer()
    return MapClassRenderer(
        JinjaTemplateRenderer(config.template.template_dir),
        config.template.template_name,
    )


_class_renderer: Optional[MapClassRenderer] = None


def get_class_renderer() -> MapClassRenderer:
    """Get the process-wide renderer for the packaged template."""
    global _class_renderer
    if _class_renderer is None:
        _class_renderer = MapClassRenderer()
    return _class_renderer
