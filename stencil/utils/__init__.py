"""
Utils package for Stencil.

This module provides the naming conventions, configuration, logging and
error types shared by the template factory components.
"""

from .exceptions import (
    StencilError,
    TemplateNotFoundError,
    TemplateContextError,
    TemplateRegistrationError,
)
from .constants import *

from .config import (
    StencilConfig,
    TemplateConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, StencilLogger

__all__ = [
    # Core exceptions
    "StencilError",
    "TemplateNotFoundError",
    "TemplateContextError",
    "TemplateRegistrationError",

    # Constants (exported via *)

    # Configuration
    "StencilConfig",
    "TemplateConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "StencilLogger",
]
