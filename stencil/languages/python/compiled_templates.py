"""
Compiled templates of the Python target language.
"""

from __future__ import annotations

from typing import Any

from ...compiled import compiled_template
from ...rendering.context import model_to_mapping
from ...settings import default_toolchain_version
from ...utils.constants import TOOLCHAIN_VERSION_KEY


@compiled_template("Python", "Header")
class HeaderTemplate:
    """Module docstring marking a file as generated."""

    def __init__(self, model: Any):
        self.model = model_to_mapping(model)

    def render(self) -> str:
        version = self.model.get(TOOLCHAIN_VERSION_KEY) or default_toolchain_version()
        notice = f"Generated by {version}. Do not edit."
        title = self.model.get("Title")
        if not title:
            return f'"""{notice}"""'
        return f'"""\n{title}\n\n{notice}\n"""'
