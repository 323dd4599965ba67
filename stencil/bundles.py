"""
Bundled Template Resources.

Each supported language ships its default text templates as package data
in ``stencil.languages.<language>.templates``. Template resources are
addressed by a dotted path built from the language and template name; a
BundleLoader turns that path into raw bytes.
"""

from __future__ import annotations

import importlib.resources
from typing import Dict, Mapping, Optional, Protocol, Union

from .utils.constants import LANGUAGE_PACKAGE, BUNDLE_NAMESPACE, TEMPLATE_EXTENSION
from .utils.logging import get_logger

logger = get_logger(__name__)


def language_module(language: str) -> str:
    """Return the module that holds the templates of a language."""
    return f"{LANGUAGE_PACKAGE}.{language.lower()}"


def bundle_package(language: str) -> str:
    """Return the package that holds the bundled text templates of a language."""
    return language_module(language) + BUNDLE_NAMESPACE.rstrip(".")


def resource_path(language: str, template: str) -> str:
    """Return the dotted resource path of a bundled template."""
    return language_module(language) + BUNDLE_NAMESPACE + template + TEMPLATE_EXTENSION


def is_missing_module(error: ModuleNotFoundError, module_name: str) -> bool:
    """Check whether an import failed because ``module_name`` itself does not exist."""
    if not error.name:
        return False
    return error.name == module_name or module_name.startswith(error.name + ".")


class BundleLoader(Protocol):
    """Capability that returns a bundled template resource, or None if absent."""

    def load(self, language: str, path: str) -> Optional[bytes]:
        ...


class PackageBundleLoader:
    """Loads bundled templates from package data via importlib.resources."""

    def load(self, language: str, path: str) -> Optional[bytes]:
        if not language.isidentifier():
            return None

        package = bundle_package(language)
        prefix = package + "."
        if not path.startswith(prefix):
            raise ValueError(f"Resource '{path}' is not inside package '{package}'")

        try:
            root = importlib.resources.files(package)
        except ModuleNotFoundError as e:
            if is_missing_module(e, package):
                logger.debug(f"No template bundle for language '{language}'")
                return None
            raise

        resource = root.joinpath(path[len(prefix):])
        if not resource.is_file():
            return None
        return resource.read_bytes()


class DictBundleLoader:
    """
    In-memory template bundle keyed by resource path.

    Useful for generators that assemble templates at runtime and for tests.
    Values may be text or bytes.
    """

    def __init__(self, resources: Optional[Mapping[str, Union[str, bytes]]] = None):
        self._resources: Dict[str, bytes] = {}
        for path, content in (resources or {}).items():
            self.add(path, content)

    @classmethod
    def for_language(cls, language: str, templates: Mapping[str, Union[str, bytes]]) -> "DictBundleLoader":
        """Create a bundle from template names of a single language."""
        return cls({resource_path(language, name): content for name, content in templates.items()})

    def add(self, path: str, content: Union[str, bytes]) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._resources[path] = content

    def load(self, language: str, path: str) -> Optional[bytes]:
        return self._resources.get(path)


def decode_resource(data: bytes) -> str:
    """Decode a bundled resource as UTF-8, dropping a leading byte order mark."""
    return data.decode("utf-8-sig")
