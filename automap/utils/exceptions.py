"""
Custom exception definitions.

This module defines the exception hierarchy for automap-specific
errors raised while reading declarations and generating classes.
"""

from typing import Optional


class AutoMapError(Exception):
    """
    Base exception for all automap-related errors.

    Carries a human-readable message plus an optional dictionary
    of context that is appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize automap error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class TemplateRenderError(AutoMapError):
    """
    Raised when the class template cannot be loaded, parsed or evaluated.

    A render failure is fatal for the generation request that hit it.
    """

    def __init__(self, message: str, template_name: str = ""):
        """
        Initialize template error.

        Args:
            message: Error description
            template_name: Name of the template being rendered
        """
        details = {}
        if template_name:
            details['template'] = template_name

        super().__init__(message, details)
        self.template_name = template_name


class GenerationError(AutoMapError):
    """
    Raised when a host asks for source text of a failed generation.
    """

    def __init__(self, message: str, class_name: str = ""):
        """
        Initialize generation error.

        Args:
            message: Error description
            class_name: Name of the class that could not be generated
        """
        details = {}
        if class_name:
            details['class_name'] = class_name

        super().__init__(message, details)
        self.class_name = class_name


class DeclarationError(AutoMapError):
    """
    Raised when a declaration document is missing mandatory fields.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        """
        Initialize declaration error.

        Args:
            message: Error description
            source: Optional path of the offending document
        """
        details = {}
        if source is not None:
            details['source'] = source

        super().__init__(message, details)
        self.source = source


class TypeParseError(AutoMapError):
    """
    Raised when a type expression such as ``Map<String, Object>`` is malformed.
    """

    def __init__(self, message: str, text: str = "", position: Optional[int] = None):
        """
        Initialize type parse error.

        Args:
            message: Error description
            text: The type expression being parsed
            position: Offset into ``text`` where parsing stopped
        """
        details = {}
        if text:
            details['text'] = text
        if position is not None:
            details['position'] = position

        super().__init__(message, details)
        self.text = text
        self.position = position
