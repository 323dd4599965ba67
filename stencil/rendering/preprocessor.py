"""
Inclusion syntax rewriting.

Template authors include other named templates with a marker on its own
line::

    class {{ Class.Name }}:
        {% template Class.Body %}

The spaces before the marker give the indentation depth of the included
output in four-space levels. Jinja2 has no such tag, so each marker is
rewritten into the directive tag handled by TemplateInclusionExtension
before the source is parsed.
"""

from __future__ import annotations

import re

from ..utils.constants import DIRECTIVE_TAG, INDENT_WIDTH

# Line start, leading spaces, then the marker with an optional name
INCLUSION_PATTERN = re.compile(r"(^|\n)( *)\{% template(?:[ \t]+(.*?))?[ \t]*%\}")


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_directive(name: str, depth: int) -> str:
    """Return the directive tag for an inclusion of ``name`` at ``depth`` levels."""
    return "{%% %s %s %d %%}" % (DIRECTIVE_TAG, _quote(name), depth)


def rewrite_inclusions(source: str) -> str:
    """
    Rewrite every ``{% template NAME %}`` marker into a directive tag.

    Depth is the number of leading spaces divided by four, truncated, so
    six spaces count as one level.

    Args:
        source: Raw template text

    Returns:
        Template text ready for the Jinja2 parser
    """
    def replace(match: re.Match) -> str:
        name = (match.group(3) or "").strip()
        depth = len(match.group(2)) // INDENT_WIDTH
        return match.group(1) + format_directive(name, depth)

    return INCLUSION_PATTERN.sub(replace, source)
