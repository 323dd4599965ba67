"""
Jinja2 environment for text templates.

Generated source code is not HTML, so autoescaping is off. Block tags
swallow the line break that follows them and the indentation before
them, which keeps control flow and inclusion lines out of the output.
"""

from __future__ import annotations

from typing import Any

import jinja2

from .extension import TemplateInclusionExtension
from .filters import FILTERS

ENVIRONMENT_DEFAULTS = {
    "autoescape": False,
    "trim_blocks": True,
    "lstrip_blocks": True,
    "keep_trailing_newline": False,
}


def create_environment(**options: Any) -> jinja2.Environment:
    """
    Create the Jinja2 environment used to parse text templates.

    Args:
        **options: Environment options overriding ENVIRONMENT_DEFAULTS

    Returns:
        Environment with the inclusion directive and Stencil filters installed
    """
    extensions = [TemplateInclusionExtension, *options.pop("extensions", ())]
    env = jinja2.Environment(extensions=extensions, **{**ENVIRONMENT_DEFAULTS, **options})
    env.filters.update(FILTERS)
    return env
