"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Stencil package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Stencil package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("STENCIL_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    # Configure root logger for stencil
    logger = logging.getLogger("stencil")
    logger.setLevel(log_level)

    # Remove existing handlers
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

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "stencil" or name.startswith("stencil."):
        return logging.getLogger(name)
    return logging.getLogger(f"stencil.{name}")


class StencilLogger:
    """
    Logging helpers for template resolution and rendering.

    Each method maps one pipeline event to a consistently formatted
    log record so resolution traces read the same across components.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_resolution(self, language: str, template: str, source: str) -> None:
        """
        Log where a template was resolved from.

        Args:
            language: Target language
            template: Template name as requested
            source: One of "override", "bundle" or "compiled"
        """
        self.logger.debug(f"Resolved template '{template}' for language '{language}' from {source}")

    def log_fallback(self, language: str, template: str) -> None:
        """
        Log fallback from the text path to compiled templates.

        Args:
            language: Target language
            template: Template name as requested
        """
        self.logger.debug(
            f"No text template '{template}' for language '{language}', trying compiled templates"
        )

    def log_cache_hit(self, source_hash: str) -> None:
        """
        Log cache hit for a parsed template.

        Args:
            source_hash: Digest of the raw template source
        """
        self.logger.debug(f"Parse cache hit for source {source_hash[:8]}...")

    def log_cache_miss(self, source_hash: str) -> None:
        """
        Log cache miss requiring a new parse.

        Args:
            source_hash: Digest of the raw template source
        """
        self.logger.debug(f"Parse cache miss for source {source_hash[:8]}...")

    def log_suppressed_inclusion(self, language: str, template: str) -> None:
        """
        Log an inclusion site whose template does not exist.

        Args:
            language: Target language
            template: Effective name of the included template
        """
        self.logger.debug(f"Included template '{template}' for language '{language}' not found, emitting nothing")


# Initialize logging on module import
setup_logging()
