"""
Compiled Template Registry.

Compiled templates are Python classes (or any factory) that take the model
as their only constructor argument and render themselves. Each language
module registers its compiled templates when imported::

    @compiled_template("Python", "Header")
    class HeaderTemplate:
        def __init__(self, model): ...
        def render(self) -> str: ...

A lookup that misses imports the language module
``stencil.languages.<language>`` once and looks again, so languages are
loaded on first use.
"""

from __future__ import annotations

import importlib
import threading
from typing import Any, Callable, Dict, Optional, Set, Tuple

from .bundles import is_missing_module
from .templates import CompiledTemplate
from .utils.constants import (
    COMPILED_ONLY_MARKER,
    COMPILED_TYPE_PREFIX,
    COMPILED_TYPE_NAMESPACE,
    COMPILED_TYPE_SUFFIX,
    LANGUAGE_PACKAGE,
)
from .utils.exceptions import TemplateNotFoundError, TemplateRegistrationError
from .utils.logging import get_logger

logger = get_logger(__name__)

TemplateFactoryFn = Callable[[Any], Any]


def compiled_type_name(language: str, template: str) -> str:
    """Return the qualified type name of a compiled template."""
    return COMPILED_TYPE_PREFIX + language + COMPILED_TYPE_NAMESPACE + template + COMPILED_TYPE_SUFFIX


class CompiledTemplateRegistry:
    """Maps (language, template name) to the factory of a compiled template."""

    def __init__(self, module_prefix: Optional[str] = LANGUAGE_PACKAGE):
        """
        Initialize compiled template registry.

        Language modules register into the global registry when imported,
        so registries other than the global one usually pass None.

        Args:
            module_prefix: Package holding one module per language, imported on
                lookup misses; None disables loading
        """
        self.module_prefix = module_prefix
        self._factories: Dict[Tuple[str, str], TemplateFactoryFn] = {}
        self._missing_modules: Set[str] = set()
        self._lock = threading.RLock()

    def register(self, language: str, template: str, factory: TemplateFactoryFn) -> TemplateFactoryFn:
        """
        Register a compiled template.

        Registering the same factory twice is a no-op.

        Raises:
            TemplateRegistrationError: If another factory already owns the slot
        """
        key = (language, template)
        with self._lock:
            existing = self._factories.get(key)
            if existing is not None and existing is not factory:
                raise TemplateRegistrationError(language, template)
            self._factories[key] = factory

        logger.debug(f"Registered compiled template {compiled_type_name(language, template)}")
        return factory

    def unregister(self, language: str, template: str) -> bool:
        """Remove a registration. Returns False if there was none."""
        with self._lock:
            return self._factories.pop((language, template), None) is not None

    def is_registered(self, language: str, template: str) -> bool:
        with self._lock:
            return (language, template) in self._factories

    def list_templates(self, language: Optional[str] = None) -> list[str]:
        """List registered type names, optionally for one language."""
        with self._lock:
            keys = sorted(self._factories)
        return [compiled_type_name(lang, name) for lang, name in keys if language is None or lang == language]

    def lookup(self, language: str, template: str) -> Optional[TemplateFactoryFn]:
        """
        Find the factory of a compiled template, loading its language module on a miss.

        Returns:
            The registered factory, or None if none exists
        """
        with self._lock:
            factory = self._factories.get((language, template))
        if factory is not None:
            return factory

        if not self._load_language(language):
            return None

        with self._lock:
            return self._factories.get((language, template))

    def _load_language(self, language: str) -> bool:
        """Import the language module. Returns False if it does not exist."""
        if self.module_prefix is None or not language.isidentifier():
            return False

        module_name = f"{self.module_prefix}.{language.lower()}"
        with self._lock:
            if module_name in self._missing_modules:
                return False

        try:
            importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if is_missing_module(e, module_name):
                logger.debug(f"No language module '{module_name}' for compiled templates")
                with self._lock:
                    self._missing_modules.add(module_name)
                return False
            raise

        return True

    def find(self, language: str, template: str, model: Any) -> Optional[CompiledTemplate]:
        """
        Instantiate the compiled template for a language and template name.

        A trailing compiled-only marker on the name is ignored.

        Returns:
            Template handle, or None if no compiled template exists
        """
        name = template.rstrip(COMPILED_ONLY_MARKER)
        factory = self.lookup(language, name)
        if factory is None:
            return None
        return CompiledTemplate(factory(model), compiled_type_name(language, name))

    def resolve(self, language: str, template: str, model: Any) -> CompiledTemplate:
        """
        Instantiate the compiled template for a language and template name.

        Raises:
            TemplateNotFoundError: If no compiled template exists
        """
        handle = self.find(language, template, model)
        if handle is None:
            raise TemplateNotFoundError(template, language)
        return handle

    def clear(self) -> None:
        """Remove all registrations and forget missing language modules."""
        with self._lock:
            self._factories.clear()
            self._missing_modules.clear()


# Global registry populated by language modules
_compiled_registry = CompiledTemplateRegistry()


def get_compiled_registry() -> CompiledTemplateRegistry:
    """Get the global compiled template registry."""
    return _compiled_registry


def compiled_template(
    language: str, template: str, registry: Optional[CompiledTemplateRegistry] = None
) -> Callable[[TemplateFactoryFn], TemplateFactoryFn]:
    """Class decorator registering a compiled template."""
    def decorator(factory: TemplateFactoryFn) -> TemplateFactoryFn:
        return (registry or _compiled_registry).register(language, template, factory)

    return decorator


def resolve_compiled(language: str, template: str, model: Any) -> CompiledTemplate:
    """Resolve a compiled template from the global registry."""
    return _compiled_registry.resolve(language, template, model)
