#!/usr/bin/env python3
"""
Basic usage example for Stencil.

This example renders a small schema with the bundled Python templates,
then renders it again with a user override directory that replaces the
Property template and extends the bundled Class template.
"""

import tempfile
from pathlib import Path

import stencil
from stencil import CodeGeneratorSettings, TemplateFactory


MODEL = {
    "Title": "Pet store models.",
    "Imports": ["from dataclasses import dataclass", "from typing import Optional"],
    "Classes": [
        {
            "Name": "Pet",
            "Description": "An animal for sale.",
            "Properties": [
                {"Name": "name", "Type": "str"},
                {"Name": "age", "Type": "int", "Default": 0},
            ],
        },
        {"Name": "Dog", "Base": "Pet", "Properties": []},
    ],
}


def main():
    """Demonstrate bundled templates and user overrides."""
    print("Stencil - Basic Usage Example")
    print("=" * 60)

    print("\n1. Rendering with bundled templates...")
    factory = TemplateFactory()
    print(factory.render("Python", "File", MODEL))

    print("2. Rendering with overrides...")
    with tempfile.TemporaryDirectory() as directory:
        overrides = Path(directory)
        (overrides / "Property.jinja").write_text(
            "{{ Property.Name }}: Optional[{{ Property.Type }}] = None\n"
        )
        # Empty template name continues with the bundled Class template
        (overrides / "Class.jinja").write_text(
            "{% filter trim %}\n@dataclass\n{% template %}\n{% endfilter %}\n"
        )

        factory = TemplateFactory(CodeGeneratorSettings(template_directory=directory))
        print(factory.render("Python", "File", MODEL))

    print("3. Parse cache:")
    print(f"   {factory.parse_cache.get_stats()}")
    print(f"Stencil version: {stencil.__version__}")


if __name__ == '__main__':
    main()
