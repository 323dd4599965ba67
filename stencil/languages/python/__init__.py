"""
Python target language.

Bundled text templates live in ``templates/``; importing this package
registers the compiled templates.
"""

from . import compiled_templates

__all__ = ["compiled_templates"]
