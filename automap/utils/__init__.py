"""
Utils package for automap.

This module provides logging, configuration, the exception hierarchy
and string helpers shared by the model and code generation packages.
"""

from .logging import setup_logging, get_logger, AutoMapLogger
from .exceptions import (
    AutoMapError,
    TemplateRenderError,
    GenerationError,
    DeclarationError,
    TypeParseError,
)
from .config import (
    AutoMapConfig,
    TemplateConfig,
    ResolverConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .string_utils import (
    escape_java_string,
    java_string_literal,
    format_type_parameters,
    is_blank,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "AutoMapLogger",
    "AutoMapError",
    "TemplateRenderError",
    "GenerationError",
    "DeclarationError",
    "TypeParseError",
    "AutoMapConfig",
    "TemplateConfig",
    "ResolverConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",
    "escape_java_string",
    "java_string_literal",
    "format_type_parameters",
    "is_blank",
]
