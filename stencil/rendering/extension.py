"""
Inclusion directive tag and handler.

The preprocessor turns every ``{% template NAME %}`` marker into a
``__stencil_template`` tag carrying the target name and indentation depth.
TemplateInclusionExtension parses that tag into a call that, at render
time, resolves the named template through the template factory with the
enclosing template's variables as model and writes its output indented to
the marker's depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.runtime import Context

from .context import RenderScope
from .filters import tab
from ..utils.constants import DIRECTIVE_TAG, COMPILED_ONLY_MARKER, TEMPLATE_INDENT
from ..utils.exceptions import TemplateContextError
from ..utils.logging import StencilLogger

_log = StencilLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class InclusionDirective:
    """A parsed inclusion: target template name and depth in indentation levels."""

    name: str
    depth: int = 0

    def effective_name(self, scope: RenderScope) -> str:
        """An empty name continues the enclosing template, skipping its override."""
        if self.name:
            return self.name
        return scope.template + COMPILED_ONLY_MARKER


def flatten_context(context: Context) -> Dict[str, Any]:
    """
    Flatten a Jinja2 context into one mapping.

    Pass a derived context to include loop and ``set`` locals; inner
    scopes override outer ones. Environment globals are left out.
    """
    env_globals = context.environment.globals
    return {
        key: value
        for key, value in context.get_all().items()
        if env_globals.get(key, _MISSING) is not value
    }


def render_inclusion(scope: RenderScope, directive: InclusionDirective, variables: Mapping[str, Any]) -> str:
    """
    Render the template named by an inclusion directive.

    Args:
        scope: Language, template and settings of the enclosing render
        directive: Target name and indentation depth
        variables: Flattened variables of the enclosing render, used as model

    Returns:
        Included output indented by the directive depth and terminated by a
        line break, or an empty string if the template does not exist or
        renders nothing
    """
    name = directive.effective_name(scope)

    factory = scope.settings.template_factory
    if factory is None:
        raise TemplateContextError("template_factory", name)

    template = factory.try_create_template(scope.language, name, variables)
    if template is None:
        _log.log_suppressed_inclusion(scope.language, name)
        return ""

    output = template.render()
    if not output:
        return ""

    return TEMPLATE_INDENT * directive.depth + tab(output, directive.depth) + "\n"


class TemplateInclusionExtension(Extension):
    """Jinja2 extension implementing the ``__stencil_template`` directive tag."""

    tags = {DIRECTIVE_TAG}

    def parse(self, parser):
        lineno = next(parser.stream).lineno

        name = parser.parse_expression()
        if parser.stream.current.type != "block_end":
            depth = parser.parse_expression()
        else:
            depth = nodes.Const(0)

        call = self.call_method(
            "_render_directive",
            [nodes.DerivedContextReference(), name, depth],
            lineno=lineno,
        )
        return nodes.Output([call], lineno=lineno)

    def _render_directive(self, context: Context, name: str, depth: int) -> str:
        variables = flatten_context(context)
        scope = RenderScope.from_mapping(variables, name)
        return render_inclusion(scope, InclusionDirective(name, int(depth)), variables)
