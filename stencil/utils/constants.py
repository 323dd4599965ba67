"""
Constants for the Stencil template factory.

This module consolidates the naming conventions used to address bundled
templates, compiled templates and template override files, along with the
reserved render context keys.
"""

# =============================================================================
# Template Naming Conventions
# =============================================================================

# File extension of text templates, both bundled and in override directories
TEMPLATE_EXTENSION = ".jinja"

# Trailing marker: skip the override directory, render the default template
COMPILED_ONLY_MARKER = "!"

# Python package that holds one subpackage per supported language
LANGUAGE_PACKAGE = "stencil.languages"

# Bundled resources: LANGUAGE_PACKAGE + "." + language + BUNDLE_NAMESPACE + name + TEMPLATE_EXTENSION
BUNDLE_NAMESPACE = ".templates."

# Compiled templates: COMPILED_TYPE_PREFIX + language + COMPILED_TYPE_NAMESPACE + name + COMPILED_TYPE_SUFFIX
COMPILED_TYPE_PREFIX = "stencil.languages."
COMPILED_TYPE_NAMESPACE = ".Templates."
COMPILED_TYPE_SUFFIX = "Template"


# =============================================================================
# Render Context Keys
# =============================================================================

LANGUAGE_KEY = "__language"
TEMPLATE_KEY = "__template"
SETTINGS_KEY = "__settings"
TOOLCHAIN_VERSION_KEY = "ToolchainVersion"

RESERVED_CONTEXT_KEYS = (LANGUAGE_KEY, TEMPLATE_KEY, SETTINGS_KEY)


# =============================================================================
# Inclusion Directive
# =============================================================================

# Jinja2 tag produced by rewriting "{% template NAME %}" markers
DIRECTIVE_TAG = "__stencil_template"

# One indentation level at an inclusion site
TEMPLATE_INDENT = "    "
INDENT_WIDTH = len(TEMPLATE_INDENT)
