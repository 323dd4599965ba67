"""
Text Template Rendering.

This package renders text templates with Jinja2. It includes:
- rewrite_inclusions: turns ``{% template NAME %}`` markers into directive tags
- ParseCache: parsed templates keyed by their raw source
- TemplateInclusionExtension: renders included templates at directive sites
- build_render_context: model flattening and reserved context keys
- tab / csharp_docs filters
"""

from .preprocessor import rewrite_inclusions, format_directive
from .environment import create_environment
from .cache import ParseCache, source_digest
from .context import RenderScope, model_to_mapping, build_render_context
from .extension import (
    InclusionDirective,
    TemplateInclusionExtension,
    flatten_context,
    render_inclusion,
)
from .filters import tab, csharp_docs

__all__ = [
    "rewrite_inclusions",
    "format_directive",
    "create_environment",
    "ParseCache",
    "source_digest",
    "RenderScope",
    "model_to_mapping",
    "build_render_context",
    "InclusionDirective",
    "TemplateInclusionExtension",
    "flatten_context",
    "render_inclusion",
    "tab",
    "csharp_docs",
]
