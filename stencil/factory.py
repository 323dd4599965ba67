"""
Template Factory.

The single entry point for code generators: resolves a (language, template
name) pair to a renderable template bound to a model. Resolution tries, in
order:

1. ``<template_directory>/<name>.jinja`` when an override directory is set
   and the name has no trailing ``!``
2. the bundled text template of the language
3. the compiled template registered for the language

Text templates may include other templates with ``{% template NAME %}``;
included templates are resolved through this same factory.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from .bundles import BundleLoader, PackageBundleLoader, decode_resource, resource_path
from .compiled import CompiledTemplateRegistry, get_compiled_registry
from .rendering.cache import ParseCache
from .settings import CodeGeneratorSettings
from .templates import Template, TextTemplate
from .utils.constants import COMPILED_ONLY_MARKER, TEMPLATE_EXTENSION
from .utils.exceptions import TemplateNotFoundError
from .utils.logging import StencilLogger


class TemplateFactory:
    """Creates templates for a code generator's settings."""

    def __init__(
        self,
        settings: Optional[CodeGeneratorSettings] = None,
        bundle_loader: Optional[BundleLoader] = None,
        registry: Optional[CompiledTemplateRegistry] = None,
        parse_cache: Optional[ParseCache] = None,
    ):
        """
        Initialize template factory.

        Args:
            settings: Generator settings (default: CodeGeneratorSettings());
                the factory binds itself as ``settings.template_factory`` if unset
            bundle_loader: Source of bundled text templates (default: package data)
            registry: Compiled templates (default: the global registry)
            parse_cache: Parsed text templates; pass one cache to several
                factories to share parses between them
        """
        self.settings = settings if settings is not None else CodeGeneratorSettings()
        if self.settings.template_factory is None:
            self.settings.template_factory = self

        self.bundle_loader = bundle_loader if bundle_loader is not None else PackageBundleLoader()
        self.registry = registry if registry is not None else get_compiled_registry()
        self.parse_cache = parse_cache if parse_cache is not None else ParseCache()
        self._log = StencilLogger(__name__)

    def create_template(self, language: str, template: str, model: Any) -> Template:
        """
        Create a template for the given language, template name and model.

        Args:
            language: Target language, e.g. "Python"
            template: Template name, e.g. "Class"
            model: Template model

        Returns:
            The template

        Raises:
            TemplateNotFoundError: If neither a text nor a compiled template exists
        """
        handle = self.try_create_template(language, template, model)
        if handle is None:
            raise TemplateNotFoundError(template, language)
        return handle

    def try_create_template(self, language: str, template: str, model: Any) -> Optional[Template]:
        """
        Create a template, or return None if none exists.

        Same resolution as create_template; I/O, parse and import errors
        still propagate.
        """
        source = self.resolve_text(language, template)
        if source is not None:
            return TextTemplate(language, template, source, model, self.settings, self.parse_cache)

        self._log.log_fallback(language, template)
        handle = self.registry.find(language, template, model)
        if handle is not None:
            self._log.log_resolution(language, template, "compiled")
        return handle

    def render(self, language: str, template: str, model: Any) -> str:
        """Create a template and render it."""
        return self.create_template(language, template, model).render()

    def resolve_text(self, language: str, template: str) -> Optional[str]:
        """
        Find the text of a template.

        Args:
            language: Target language
            template: Template name, optionally ending with ``!`` to skip the override directory

        Returns:
            Raw template text, or None if text templates are disabled or none exists
        """
        if not self.settings.use_text_templates:
            return None

        if not template.endswith(COMPILED_ONLY_MARKER) and self.settings.template_directory:
            path = os.path.join(self.settings.template_directory, template + TEMPLATE_EXTENSION)
            if os.path.isfile(path):
                with open(path, "r", encoding="utf-8-sig") as f:
                    source = f.read()
                self._log.log_resolution(language, template, "override")
                return source

        name = template.rstrip(COMPILED_ONLY_MARKER)
        data = self.bundle_loader.load(language, resource_path(language, name))
        if data is None:
            return None

        self._log.log_resolution(language, template, "bundle")
        return decode_resource(data)
