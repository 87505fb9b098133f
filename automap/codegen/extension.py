"""
Map Extension.

The host-facing entry point. A host asks three questions per value type:
whether the extension applies, which abstract members it implements, and
the source text of the implementation class.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from .applicability import applicable, consumed_methods
from .descriptor import DescriptorBuilder
from .resolver import PropertyResolver
from .templates.renderer import create_class_renderer, get_class_renderer
from .types import (
    ClassRenderer,
    ExtensionContext,
    Failed,
    Generated,
    GenerationRequest,
    GenerationResult,
)
from ..model.elements import MethodElement
from ..utils.config import DEFAULT_TEMPLATE_NAME, AutoMapConfig, get_config
from ..utils.exceptions import AutoMapError
from ..utils.logging import AutoMapLogger

logger = AutoMapLogger(__name__)


def _renderer_for(config: AutoMapConfig) -> ClassRenderer:
    # The shared renderer serves the packaged template only
    if config.template.template_dir is None and config.template.template_name == DEFAULT_TEMPLATE_NAME:
        return get_class_renderer()
    return create_class_renderer(config)


class MapExtension:
    """Generates ``Map<String, Object>`` implementations for value types."""

    def __init__(self, config: Optional[AutoMapConfig] = None, renderer: Optional[ClassRenderer] = None):
        if config is None:
            config = get_config()
        self._resolver = PropertyResolver(config.resolver.map_key_annotation)
        if renderer is None:
            renderer = _renderer_for(config)
        self._renderer = renderer
        self._builder = DescriptorBuilder(self._resolver)

    @property
    def resolver(self) -> PropertyResolver:
        return self._resolver

    def applicable(self, context: ExtensionContext) -> bool:
        result = applicable(context.declaration, context.types)
        if not result:
            logger.log_inapplicable(context.declaration.qualified_name)
        return result

    def consume_methods(self, context: ExtensionContext) -> FrozenSet[MethodElement]:
        return consumed_methods(context.types)

    def generate_class(
        self,
        context: ExtensionContext,
        class_name: str,
        class_to_extend: str,
        is_final: bool,
    ) -> GenerationResult:
        """
        Generate the implementation class.

        Returns:
            ``Generated`` with the complete source, or ``Failed`` when the
            template cannot be loaded or evaluated
        """
        request = GenerationRequest(context, class_name, class_to_extend, is_final)
        descriptor = self._builder.build(request)
        logger.log_generation_start(class_name, len(descriptor.properties))
        try:
            source = self._renderer.render(descriptor)
        except AutoMapError as e:
            logger.log_generation_failure(class_name, str(e))
            return Failed(str(e), class_name, e)
        logger.log_generation_done(class_name, len(source))
        return Generated(source)

    def generate_source(
        self,
        context: ExtensionContext,
        class_name: str,
        class_to_extend: str,
        is_final: bool,
    ) -> str:
        """
        Like ``generate_class`` but returns the text directly.

        Raises:
            GenerationError: if generation failed
        """
        return self.generate_class(context, class_name, class_to_extend, is_final).unwrap()
