"""
Render context construction.

A text template renders against a flat mapping built from the caller's
model plus reserved keys naming the active language, template and
settings. Inclusion directives recover those reserved values as a
RenderScope before re-entering the template factory.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, TYPE_CHECKING

from ..utils.constants import (
    LANGUAGE_KEY,
    TEMPLATE_KEY,
    SETTINGS_KEY,
    TOOLCHAIN_VERSION_KEY,
)
from ..utils.exceptions import TemplateContextError

if TYPE_CHECKING:
    from ..settings import CodeGeneratorSettings


@dataclass(frozen=True)
class RenderScope:
    """Ambient values of one render: active language, template and settings."""

    language: str
    template: str
    settings: "CodeGeneratorSettings"

    @classmethod
    def from_mapping(cls, variables: Mapping[str, Any], directive: str = "") -> "RenderScope":
        """
        Recover the scope from a flattened render context.

        Raises:
            TemplateContextError: If a reserved key is missing
        """
        for key in (SETTINGS_KEY, LANGUAGE_KEY, TEMPLATE_KEY):
            if variables.get(key) is None:
                raise TemplateContextError(key, directive)

        return cls(
            language=variables[LANGUAGE_KEY],
            template=variables[TEMPLATE_KEY],
            settings=variables[SETTINGS_KEY],
        )


def model_to_mapping(model: Any) -> Dict[str, Any]:
    """
    Flatten a model into template variables.

    Mappings are copied, dataclasses contribute their fields, any other
    object contributes its public non-callable attributes. None yields
    an empty mapping.
    """
    if model is None:
        return {}

    if isinstance(model, Mapping):
        return dict(model)

    if dataclasses.is_dataclass(model) and not isinstance(model, type):
        return {f.name: getattr(model, f.name) for f in dataclasses.fields(model)}

    variables = {}
    for name in dir(model):
        if name.startswith("_"):
            continue
        value = getattr(model, name)
        if callable(value):
            continue
        variables[name] = value
    return variables


def build_render_context(model: Any, scope: RenderScope) -> Dict[str, Any]:
    """
    Build the variables of one text template render.

    The reserved language, template and settings keys always replace
    same-named model fields; the toolchain version is only a default.
    """
    variables = model_to_mapping(model)
    variables[LANGUAGE_KEY] = scope.language
    variables[TEMPLATE_KEY] = scope.template
    variables[SETTINGS_KEY] = scope.settings

    if TOOLCHAIN_VERSION_KEY not in variables:
        variables[TOOLCHAIN_VERSION_KEY] = scope.settings.toolchain_version

    return variables
