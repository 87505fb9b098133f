"""
Configuration System for automap.

This module provides a single configuration object covering template
lookup, marker resolution and logging. Values come from a JSON or YAML
file, with environment variables taking precedence for the settings
a build script most often needs to change.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .logging import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_TEMPLATE_NAME = "auto_value_map.java.j2"
DEFAULT_MAP_KEY_ANNOTATION = "automap.annotation.MapKey"


@dataclass
class TemplateConfig:
    """Template lookup configuration."""

    template_dir: Optional[str] = None
    template_name: str = DEFAULT_TEMPLATE_NAME


@dataclass
class ResolverConfig:
    """Property resolution configuration."""

    map_key_annotation: str = DEFAULT_MAP_KEY_ANNOTATION


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "automap.log"


class AutoMapConfig:
    """
    Unified configuration manager for automap.

    Configuration is read once at construction. Generation code only
    reads from it, so one instance can be shared between requests.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self._explicit_file = config_file is not None
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.template = self._create_template_config()
        self.resolver = self._create_resolver_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "automap_config.yaml"
        json_config = config_dir / "automap_config.json"

        if yaml_config.exists():
            return yaml_config
        else:
            return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit_file:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            else:
                logger.debug(f"No configuration file at {self.config_file}, using defaults")
            return {}
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}
        if not isinstance(config_data, dict):
            logger.warning(f"Ignoring configuration {self.config_file}: top level is not a mapping")
            return {}
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_template_config(self) -> TemplateConfig:
        """Create template configuration from loaded data."""
        template_data = self._config_data.get("template", {})

        # Environment variable wins over the file
        template_dir = os.getenv("AUTOMAP_TEMPLATE_DIR") or template_data.get("template_dir")

        return TemplateConfig(
            template_dir=template_dir,
            template_name=template_data.get("template_name", DEFAULT_TEMPLATE_NAME),
        )

    def _create_resolver_config(self) -> ResolverConfig:
        """Create resolver configuration from loaded data."""
        resolver_data = self._config_data.get("resolver", {})

        return ResolverConfig(
            map_key_annotation=resolver_data.get("map_key_annotation", DEFAULT_MAP_KEY_ANNOTATION),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        level = os.getenv("AUTOMAP_LOG_LEVEL") or log_data.get("level", "INFO")

        return LoggingConfig(
            level=level,
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "automap.log"),
        )

    def apply_logging(self) -> None:
        """Reconfigure the automap logger from the logging section."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a plain dictionary."""
        return {
            "version": "1.0",
            "template": {
                "template_dir": self.template.template_dir,
                "template_name": self.template.template_name,
            },
            "resolver": {
                "map_key_annotation": self.resolver.map_key_annotation,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file as JSON."""
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[AutoMapConfig] = None


def get_config() -> AutoMapConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = AutoMapConfig()
        _global_config.apply_logging()
    return _global_config


def set_config(config: Optional[AutoMapConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config
    if config is not None:
        config.apply_logging()


def load_config(config_file: str) -> AutoMapConfig:
    """Load configuration from a specific file."""
    return AutoMapConfig(config_file)
