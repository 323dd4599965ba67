"""
Template handles returned by the template factory.

A handle is bound to its model when created and renders to a string with
no arguments. Text templates are rendered by Jinja2 through the shared
parse cache; compiled templates render themselves.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable, TYPE_CHECKING

from .rendering.context import RenderScope, build_render_context

if TYPE_CHECKING:
    from .rendering.cache import ParseCache
    from .settings import CodeGeneratorSettings


@runtime_checkable
class Template(Protocol):
    """A template bound to its model."""

    def render(self) -> str:
        ...


class TextTemplate:
    """A Jinja2 text template bound to language, name, model and settings."""

    def __init__(
        self,
        language: str,
        name: str,
        source: str,
        model: Any,
        settings: "CodeGeneratorSettings",
        parse_cache: "ParseCache",
    ):
        self.language = language
        self.name = name
        self.source = source
        self.model = model
        self.settings = settings
        self._parse_cache = parse_cache

    def render(self) -> str:
        scope = RenderScope(language=self.language, template=self.name, settings=self.settings)
        variables = build_render_context(self.model, scope)
        template = self._parse_cache.get_or_parse(self.source)
        return template.render(variables)

    def __repr__(self) -> str:
        return f"TextTemplate(language={self.language!r}, name={self.name!r})"


class CompiledTemplate:
    """Adapts an instantiated compiled template to the Template protocol."""

    def __init__(self, renderer: Any, type_name: str = ""):
        if not callable(getattr(renderer, "render", None)):
            raise TypeError(f"Compiled template {type_name or type(renderer).__name__} has no render() method")
        self.renderer = renderer
        self.type_name = type_name or type(renderer).__qualname__

    def render(self) -> str:
        return self.renderer.render()

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.type_name})"
