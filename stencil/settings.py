"""
Code generator settings read by the template factory.

Only the fields consumed during template resolution live here; code
generators carry their own settings alongside.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Any, TYPE_CHECKING

from .utils.config import StencilConfig, get_config

if TYPE_CHECKING:
    from .factory import TemplateFactory


def default_toolchain_version() -> str:
    """Return the toolchain version stamped into generated files by default."""
    # Import at runtime to avoid circular imports
    from . import __version__
    return f"stencil {__version__}"


@dataclass
class CodeGeneratorSettings:
    """Settings shared by every template rendered for one code generator."""

    use_text_templates: bool = True
    template_directory: Optional[str] = None
    toolchain_version: str = field(default_factory=default_toolchain_version)

    # Re-entered by inclusion directives; bound by TemplateFactory when unset
    template_factory: Optional["TemplateFactory"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_config(cls, config: Optional[StencilConfig] = None, **overrides: Any) -> "CodeGeneratorSettings":
        """Create settings from a Stencil configuration."""
        if config is None:
            config = get_config()

        kwargs: dict[str, Any] = {
            "use_text_templates": config.templates.use_text_templates,
            "template_directory": config.templates.template_directory,
        }
        if config.templates.toolchain_version:
            kwargs["toolchain_version"] = config.templates.toolchain_version

        kwargs.update(overrides)
        return cls(**kwargs)
