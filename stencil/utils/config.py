"""
Configuration System for Stencil.

This module provides a unified configuration interface for template
resolution and logging, loaded from a single JSON or YAML file with
environment variable overrides.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .logging import get_logger, setup_logging

logger = get_logger(__name__)

_TRUTHY = ("1", "true", "yes")


@dataclass
class TemplateConfig:
    """Template resolution configuration."""

    use_text_templates: bool = True
    template_directory: Optional[str] = None
    toolchain_version: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "stencil.log"


class StencilConfig:
    """
    Unified configuration manager for Stencil.

    All options live in one JSON or YAML file; a handful of environment
    variables override the file for the common deployment switches.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.templates = self._create_template_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "stencil_config.yaml"
        json_config = config_dir / "stencil_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        try:
            if self.config_file.exists():
                with open(self.config_file, "r", encoding="utf-8") as f:
                    if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                        config_data = yaml.safe_load(f)
                    else:
                        config_data = json.load(f)
                logger.info(f"Loaded configuration from {self.config_file}")
                return config_data or {}
            else:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
                return {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

    def _create_template_config(self) -> TemplateConfig:
        """Create template configuration from loaded data."""
        template_data = self._config_data.get("templates", {})

        # Check environment variable overrides
        env_disabled = os.getenv("STENCIL_DISABLE_TEXT_TEMPLATES", "").lower() in _TRUTHY
        use_text_templates = not env_disabled and template_data.get("use_text_templates", True)

        template_directory = os.getenv("STENCIL_TEMPLATE_DIR") or template_data.get("template_directory")

        return TemplateConfig(
            use_text_templates=use_text_templates,
            template_directory=template_directory,
            toolchain_version=template_data.get("toolchain_version"),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "stencil.log"),
        )

    def is_text_templates_enabled(self) -> bool:
        """Check if text templates are enabled."""
        return self.templates.use_text_templates

    def configure_logging(self) -> None:
        """Apply the logging section to the stencil logger."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(self.logging.level, log_file)

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "Stencil Configuration",
            "templates": {
                "use_text_templates": self.templates.use_text_templates,
                "template_directory": self.templates.template_directory,
                "toolchain_version": self.templates.toolchain_version,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[StencilConfig] = None


def get_config() -> StencilConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = StencilConfig()
    return _global_config


def set_config(config: Optional[StencilConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> StencilConfig:
    """Load configuration from a specific file."""
    return StencilConfig(config_file)
