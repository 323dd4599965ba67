"""
Unit tests for bundled template resources.
"""

import pytest

from stencil.bundles import (
    DictBundleLoader,
    PackageBundleLoader,
    bundle_package,
    decode_resource,
    language_module,
    resource_path,
)


class TestResourceAddressing:
    """Test the resource addressing convention."""

    def test_language_module(self):
        assert language_module("CSharp") == "stencil.languages.csharp"

    def test_bundle_package(self):
        assert bundle_package("Python") == "stencil.languages.python.templates"

    def test_resource_path(self):
        assert resource_path("Python", "Class") == "stencil.languages.python.templates.Class.jinja"

    def test_dotted_template_name(self):
        assert resource_path("Go", "Class.Body") == "stencil.languages.go.templates.Class.Body.jinja"


class TestPackageBundleLoader:
    """Test loading templates from package data."""

    def setup_method(self):
        """Set up test fixtures."""
        self.loader = PackageBundleLoader()

    def test_load_bundled_template(self):
        data = self.loader.load("Python", resource_path("Python", "Class"))
        assert b"class {{ Class.Name }}" in data

    def test_missing_template(self):
        assert self.loader.load("Python", resource_path("Python", "Nope")) is None

    def test_missing_language(self):
        assert self.loader.load("Cobol", resource_path("Cobol", "Class")) is None

    def test_invalid_language(self):
        assert self.loader.load("C++", "whatever") is None

    def test_path_outside_language_package(self):
        with pytest.raises(ValueError):
            self.loader.load("Python", resource_path("Go", "Class"))


class TestDictBundleLoader:
    """Test the in-memory bundle."""

    def test_text_is_encoded(self):
        loader = DictBundleLoader({"a.b.jinja": "text"})
        assert loader.load("Go", "a.b.jinja") == b"text"

    def test_bytes_kept(self):
        loader = DictBundleLoader({"a.b.jinja": b"\xef\xbb\xbftext"})
        assert loader.load("Go", "a.b.jinja") == b"\xef\xbb\xbftext"

    def test_for_language(self):
        loader = DictBundleLoader.for_language("Go", {"Class": "body"})
        assert loader.load("Go", resource_path("Go", "Class")) == b"body"
        assert loader.load("Go", resource_path("Go", "Other")) is None

    def test_add(self):
        loader = DictBundleLoader()
        loader.add(resource_path("Go", "Class"), "body")
        assert loader.load("Go", resource_path("Go", "Class")) == b"body"


class TestDecodeResource:
    """Test resource decoding."""

    def test_utf8(self):
        assert decode_resource("héllo".encode("utf-8")) == "héllo"

    def test_byte_order_mark_dropped(self):
        assert decode_resource(b"\xef\xbb\xbfbody") == "body"
