"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
automap package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the automap package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("AUTOMAP_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("automap")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Host build output should not be duplicated through the root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "automap" or name.startswith("automap."):
        return logging.getLogger(name)
    return logging.getLogger(f"automap.{name}")


class AutoMapLogger:
    """
    Domain logging helpers for the generation pipeline.

    Each method emits one message at the level that matches how
    interesting the event is to someone watching a host build.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, class_name: str, property_count: int) -> None:
        """
        Log beginning of class generation.

        Args:
            class_name: Name of the class being generated
            property_count: Number of properties backing the map
        """
        self.logger.info(f"Generating {class_name} ({property_count} properties)")

    def log_generation_done(self, class_name: str, source_length: int) -> None:
        """
        Log successful class generation.

        Args:
            class_name: Name of the generated class
            source_length: Length of the emitted source text
        """
        self.logger.debug(f"Generated {class_name}: {source_length} characters")

    def log_key_override(self, property_name: str, key: str, source: str) -> None:
        """
        Log a storage key that differs from the property name.

        Args:
            property_name: Declared property name
            key: Effective storage key
            source: Marker that supplied the key
        """
        self.logger.debug(f"Property '{property_name}' stored under '{key}' (from @{source})")

    def log_inapplicable(self, type_name: str) -> None:
        """
        Log a declaration that does not satisfy the map contract.

        Args:
            type_name: Qualified name of the skipped declaration
        """
        self.logger.debug(f"Skipping {type_name}: not assignable to Map<String, Object>")

    def log_generation_failure(self, class_name: str, reason: str) -> None:
        """
        Log a fatal generation failure.

        Args:
            class_name: Name of the class that could not be generated
            reason: Failure description
        """
        self.logger.error(f"Failed to generate {class_name}: {reason}")


# Initialize logging on module import
setup_logging()
