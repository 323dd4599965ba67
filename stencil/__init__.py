"""
Stencil: Template Factory for Code Generators

Resolves a target language and a named template slot ("Class",
"Property", ...) to a renderable template and renders it against a model.

Key Features:
- User override directory, bundled per-language Jinja2 templates and
  compiled Python templates behind one interface
- ``{% template NAME %}`` inclusion with indentation carried across the
  inclusion boundary
- Parsed templates cached by source text and shared between renders

Usage:
    from stencil import TemplateFactory, CodeGeneratorSettings

    factory = TemplateFactory(CodeGeneratorSettings(template_directory="my_templates"))
    code = factory.create_template("Python", "File", model).render()
"""

__version__ = "0.1.0"
__author__ = "Stencil Team"
__email__ = "stencil@example.com"

# Public API exports
from .factory import TemplateFactory
from .settings import CodeGeneratorSettings
from .templates import Template, TextTemplate, CompiledTemplate
from .compiled import (
    CompiledTemplateRegistry,
    compiled_template,
    compiled_type_name,
    get_compiled_registry,
    resolve_compiled,
)
from .bundles import BundleLoader, PackageBundleLoader, DictBundleLoader, resource_path
from .rendering import ParseCache, rewrite_inclusions
from .utils.exceptions import (
    StencilError,
    TemplateNotFoundError,
    TemplateContextError,
    TemplateRegistrationError,
)
from .utils.config import StencilConfig, get_config

__all__ = [
    "TemplateFactory",
    "CodeGeneratorSettings",
    "Template",
    "TextTemplate",
    "CompiledTemplate",
    "CompiledTemplateRegistry",
    "compiled_template",
    "compiled_type_name",
    "get_compiled_registry",
    "resolve_compiled",
    "BundleLoader",
    "PackageBundleLoader",
    "DictBundleLoader",
    "resource_path",
    "ParseCache",
    "rewrite_inclusions",
    "StencilError",
    "TemplateNotFoundError",
    "TemplateContextError",
    "TemplateRegistrationError",
    "StencilConfig",
    "get_config",
]
