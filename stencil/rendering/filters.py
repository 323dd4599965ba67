"""
Text filters available to every text template.

Both filters work in whole indentation levels of four spaces, the same
unit the inclusion directive uses.
"""

from __future__ import annotations

from typing import Optional

from ..utils.constants import TEMPLATE_INDENT


def tab(text: Optional[str], count: int) -> str:
    """
    Indent every line after the first by ``count`` levels.

    The first line is left alone because the template already places it
    at the right column.

    Args:
        text: Text to indent, None renders as empty
        count: Number of indentation levels

    Returns:
        Re-indented text
    """
    if text is None:
        return ""
    return str(text).replace("\n", "\n" + TEMPLATE_INDENT * count)


def csharp_docs(text: Optional[str], count: int = 0) -> str:
    """
    Continue a multi-line description as C# XML documentation comment lines.

    Args:
        text: Description text, None renders as empty
        count: Indentation levels of the comment block

    Returns:
        Text with every line break followed by ``///``
    """
    if text is None:
        return ""
    return str(text).replace("\r", "").replace("\n", "\n" + TEMPLATE_INDENT * count + "/// ")


FILTERS = {
    "tab": tab,
    "csharp_docs": csharp_docs,
}
