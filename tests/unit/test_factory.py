"""
Unit tests for the template factory.

This module tests resolution precedence between override files, bundled
text templates and compiled templates, and the rendering of text
templates through the shared parse cache.
"""

from unittest.mock import patch

import pytest

from stencil.factory import TemplateFactory
from stencil.rendering.cache import ParseCache
from stencil.settings import CodeGeneratorSettings
from stencil.templates import CompiledTemplate, Template, TextTemplate
from stencil.utils.exceptions import TemplateNotFoundError


class FooTemplate:
    def __init__(self, model):
        self.model = model

    def render(self):
        return "compiled"


class TestResolutionPrecedence:
    """Test override > bundle > compiled precedence."""

    @pytest.fixture(autouse=True)
    def setup_sources(self, override_dir, registry):
        (override_dir / "Foo.jinja").write_text("override")
        registry.register("Go", "Foo", FooTemplate)
        self.override_dir = override_dir
        self.registry = registry

    def test_override_wins(self, make_factory):
        factory = make_factory({"Foo": "bundle"}, registry=self.registry,
                               template_directory=str(self.override_dir))
        assert factory.render("Go", "Foo", {}) == "override"

    def test_bundle_without_override_directory(self, make_factory):
        factory = make_factory({"Foo": "bundle"}, registry=self.registry)
        assert factory.render("Go", "Foo", {}) == "bundle"

    def test_bundle_when_override_missing(self, make_factory):
        factory = make_factory({"Bar": "bundle"}, registry=self.registry,
                               template_directory=str(self.override_dir))
        assert factory.render("Go", "Bar", {}) == "bundle"

    def test_compiled_when_no_text(self, make_factory):
        factory = make_factory(registry=self.registry)
        handle = factory.create_template("Go", "Foo", {})

        assert isinstance(handle, CompiledTemplate)
        assert handle.render() == "compiled"

    def test_text_templates_disabled(self, make_factory):
        """Disabling text templates skips both override and bundle."""
        factory = make_factory({"Foo": "bundle"}, registry=self.registry,
                               template_directory=str(self.override_dir), use_text_templates=False)
        assert factory.render("Go", "Foo", {}) == "compiled"

    def test_marker_skips_override(self, make_factory):
        factory = make_factory({"Foo": "bundle"}, registry=self.registry,
                               template_directory=str(self.override_dir))
        assert factory.render("Go", "Foo!", {}) == "bundle"

    def test_marker_stripped_for_compiled(self, make_factory):
        factory = make_factory(registry=self.registry, template_directory=str(self.override_dir))
        assert factory.render("Go", "Foo!", {}) == "compiled"


class TestResolveText:
    """Test text template lookup."""

    def test_override_file_read(self, make_factory, override_dir):
        (override_dir / "Class.jinja").write_text("line1\nline2\n")
        factory = make_factory(template_directory=str(override_dir))
        assert factory.resolve_text("Go", "Class") == "line1\nline2\n"

    def test_override_byte_order_mark(self, make_factory, override_dir):
        (override_dir / "Class.jinja").write_bytes(b"\xef\xbb\xbfbody")
        factory = make_factory(template_directory=str(override_dir))
        assert factory.resolve_text("Go", "Class") == "body"

    def test_override_read_error_propagates(self, make_factory, override_dir):
        (override_dir / "Class.jinja").write_text("body")
        factory = make_factory({"Class": "bundle"}, template_directory=str(override_dir))

        with patch("stencil.factory.open", side_effect=PermissionError("denied"), create=True):
            with pytest.raises(PermissionError):
                factory.resolve_text("Go", "Class")

    def test_override_directory_entry_is_not_a_file(self, make_factory, override_dir):
        (override_dir / "Class.jinja").mkdir()
        factory = make_factory({"Class": "bundle"}, template_directory=str(override_dir))
        assert factory.resolve_text("Go", "Class") == "bundle"

    def test_missing(self, make_factory):
        assert make_factory().resolve_text("Go", "Class") is None

    def test_disabled(self, make_factory):
        factory = make_factory({"Class": "bundle"}, use_text_templates=False)
        assert factory.resolve_text("Go", "Class") is None

    def test_bundle_queried_with_stripped_name(self, make_factory):
        factory = make_factory({"Class": "bundle"})
        assert factory.resolve_text("Go", "Class!") == "bundle"


class TestTemplateNotFound:
    """Test resolution failures."""

    def test_create_template_raises(self, make_factory):
        factory = make_factory()
        with pytest.raises(TemplateNotFoundError) as exc_info:
            factory.create_template("Go", "Nonexistent", {})

        assert exc_info.value.template == "Nonexistent"
        assert exc_info.value.language == "Go"
        assert "Nonexistent" in str(exc_info.value)
        assert "Go" in str(exc_info.value)

    def test_try_create_template_returns_none(self, make_factory):
        assert make_factory().try_create_template("Go", "Nonexistent", {}) is None

    def test_default_factory_missing_language(self):
        """Resolution through package data and language modules misses cleanly."""
        factory = TemplateFactory()
        with pytest.raises(TemplateNotFoundError):
            factory.create_template("Go", "Nonexistent", {})


class TestTextTemplate:
    """Test rendering of text templates."""

    def test_create_returns_text_template(self, make_factory):
        handle = make_factory({"Class": "x"}).create_template("Go", "Class", {"Name": "Pet"})

        assert isinstance(handle, TextTemplate)
        assert isinstance(handle, Template)
        assert handle.language == "Go"
        assert handle.name == "Class"
        assert handle.source == "x"
        assert handle.model == {"Name": "Pet"}

    def test_render_model(self, make_factory):
        factory = make_factory({"Class": "class {{ Name }}"})
        assert factory.render("Go", "Class", {"Name": "Pet"}) == "class Pet"

    def test_render_is_idempotent(self, make_factory):
        factory = make_factory({"Class": "{% for p in Props %}{{ p }};{% endfor %}"})
        handle = factory.create_template("Go", "Class", {"Props": ["a", "b"]})
        assert handle.render() == handle.render() == "a;b;"

    def test_reserved_keys_available(self, make_factory):
        factory = make_factory({"Class": "{{ __language }}/{{ __template }}/{{ ToolchainVersion }}"})
        assert factory.render("Go", "Class", {}) == "Go/Class/stencil test"

    def test_undefined_renders_empty(self, make_factory):
        factory = make_factory({"Class": "[{{ Missing }}]"})
        assert factory.render("Go", "Class", {}) == "[]"

    def test_no_autoescape(self, make_factory):
        factory = make_factory({"Class": "{{ Code }}"})
        assert factory.render("Go", "Class", {"Code": "a < b && c"}) == "a < b && c"

    def test_identical_sources_parse_once(self, make_factory):
        """Templates under different names with the same body share one parse."""
        factory = make_factory({"One": "same {{ x }}", "Two": "same {{ x }}"})

        assert factory.render("Go", "One", {"x": 1}) == "same 1"
        assert factory.render("Go", "Two", {"x": 2}) == "same 2"
        assert factory.parse_cache.get_stats() == {"entries": 1, "hits": 1, "misses": 1}

    def test_source_captured_at_creation(self, make_factory, override_dir):
        """Editing the override file does not change an existing handle."""
        path = override_dir / "Class.jinja"
        path.write_text("first")
        factory = make_factory(template_directory=str(override_dir))
        handle = factory.create_template("Go", "Class", {})

        assert handle.render() == "first"
        path.write_text("second")
        assert handle.render() == "first"
        assert factory.render("Go", "Class", {}) == "second"

    def test_shared_parse_cache(self, make_factory):
        cache = ParseCache()
        first = make_factory({"Class": "body"}, parse_cache=cache)
        second = make_factory({"Class": "body"}, parse_cache=cache)

        first.render("Go", "Class", {})
        second.render("Go", "Class", {})
        assert len(cache) == 1


class TestFactorySettings:
    """Test settings binding."""

    def test_default_settings(self):
        factory = TemplateFactory()
        assert factory.settings.use_text_templates is True
        assert factory.settings.template_directory is None
        assert factory.settings.template_factory is factory

    def test_binds_itself(self):
        settings = CodeGeneratorSettings()
        factory = TemplateFactory(settings)
        assert settings.template_factory is factory

    def test_keeps_existing_factory(self):
        outer = TemplateFactory()
        settings = CodeGeneratorSettings(template_factory=outer)
        TemplateFactory(settings)
        assert settings.template_factory is outer

    def test_inclusions_use_settings_factory(self, make_factory):
        """Nested templates resolve through the factory named by the settings."""
        custom = make_factory({"Child": "from custom"})
        factory = make_factory({"Parent": "{% template Child %}", "Child": "from default"},
                               template_factory=custom)
        assert factory.render("Go", "Parent", {}) == "from custom\n"
