"""
Supported target languages.

Each subpackage is named after a language in lower case and holds:
- templates/: bundled text templates, one ``<Name>.jinja`` file per template
- compiled templates registered with ``@compiled_template`` on import
"""
