"""
Pytest configuration and shared fixtures for Stencil tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
from typing import Dict, Optional

from stencil.bundles import DictBundleLoader
from stencil.compiled import CompiledTemplateRegistry
from stencil.factory import TemplateFactory
from stencil.rendering.cache import ParseCache
from stencil.settings import CodeGeneratorSettings
from stencil.utils.config import set_config


TEST_LANGUAGE = "Go"
TEST_TOOLCHAIN_VERSION = "stencil test"


def build_factory(
    templates: Optional[Dict[str, str]] = None,
    language: str = TEST_LANGUAGE,
    registry: Optional[CompiledTemplateRegistry] = None,
    parse_cache: Optional[ParseCache] = None,
    **settings,
) -> TemplateFactory:
    """
    Create a factory whose bundle holds ``templates`` for one language.

    Compiled templates come from a fresh registry that never imports
    language modules unless one is given.
    """
    settings.setdefault("toolchain_version", TEST_TOOLCHAIN_VERSION)
    return TemplateFactory(
        CodeGeneratorSettings(**settings),
        bundle_loader=DictBundleLoader.for_language(language, templates or {}),
        registry=registry if registry is not None else CompiledTemplateRegistry(module_prefix=None),
        parse_cache=parse_cache,
    )


@pytest.fixture
def registry():
    """Create an isolated compiled template registry."""
    return CompiledTemplateRegistry(module_prefix=None)


@pytest.fixture
def override_dir(tmp_path):
    """Create an empty template override directory."""
    directory = tmp_path / "templates"
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep environment overrides and the global config out of every test."""
    monkeypatch.delenv("STENCIL_DISABLE_TEXT_TEMPLATES", raising=False)
    monkeypatch.delenv("STENCIL_TEMPLATE_DIR", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def pet_model():
    """Create a model for the bundled Python File template."""
    return {
        "Imports": ["import enum"],
        "Classes": [
            {
                "Name": "Pet",
                "Properties": [
                    {"Name": "name", "Type": "str"},
                    {"Name": "age", "Type": "int", "Default": 0},
                ],
            },
            {"Name": "Empty", "Base": "Pet", "Properties": []},
        ],
    }


@pytest.fixture
def make_factory():
    """Return a builder for factories backed by an in-memory bundle."""
    return build_factory
