"""
Custom exception definitions.

This module defines the exception hierarchy for Stencil-specific
errors raised during template resolution and rendering.
"""

from typing import Optional


class StencilError(Exception):
    """
    Base exception for all Stencil-related errors.

    This is the root exception class for all Stencil-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize Stencil error.

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


class TemplateNotFoundError(StencilError):
    """
    Raised when no template exists for a language and template name.

    Neither a text template (override directory or bundled resource)
    nor a registered compiled template could be located.
    """

    def __init__(self, template: str, language: str):
        """
        Initialize template not found error.

        Args:
            template: Requested template name
            language: Requested target language
        """
        message = f"Could not load template '{template}' for language '{language}'"
        super().__init__(message)
        self.template = template
        self.language = language


class TemplateContextError(StencilError):
    """
    Raised when an inclusion directive runs without its ambient context.

    Text templates always inject the reserved keys before rendering, so a
    missing key means the template was rendered outside the factory.
    """

    def __init__(self, key: str, directive: str = ""):
        """
        Initialize template context error.

        Args:
            key: Reserved context key that was missing
            directive: Optional name of the directive's target template
        """
        details = {"key": key}
        if directive:
            details["directive"] = directive

        super().__init__("Inclusion directive rendered without reserved context key", details)
        self.key = key
        self.directive = directive


class TemplateRegistrationError(StencilError):
    """
    Raised when two different compiled templates claim the same slot.
    """

    def __init__(self, language: str, template: str):
        """
        Initialize registration error.

        Args:
            language: Target language of the conflicting registration
            template: Template name of the conflicting registration
        """
        message = f"Compiled template '{template}' for language '{language}' is already registered"
        super().__init__(message, {"language": language, "template": template})
        self.language = language
        self.template = template
