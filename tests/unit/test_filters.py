"""
Unit tests for the text template filters.
"""

from stencil.rendering.environment import create_environment
from stencil.rendering.filters import tab, csharp_docs


class TestTabFilter:
    """Test the tab filter."""

    def test_indents_following_lines(self):
        assert tab("a\nb\nc", 1) == "a\n    b\n    c"

    def test_multiple_levels(self):
        assert tab("a\nb", 2) == "a\n        b"

    def test_zero_levels(self):
        assert tab("a\nb", 0) == "a\nb"

    def test_none_is_empty(self):
        assert tab(None, 3) == ""

    def test_single_line_unchanged(self):
        assert tab("single", 4) == "single"


class TestCSharpDocsFilter:
    """Test the csharp_docs filter."""

    def test_continues_comment(self):
        assert csharp_docs("first\nsecond") == "first\n/// second"

    def test_drops_carriage_returns(self):
        assert csharp_docs("first\r\nsecond", 1) == "first\n    /// second"

    def test_none_is_empty(self):
        assert csharp_docs(None) == ""


class TestFilterRegistration:
    """Test filters are available to templates."""

    def test_filters_in_environment(self):
        env = create_environment()
        template = env.from_string("{{ text | tab(1) }}|{{ text | csharp_docs }}")
        assert template.render(text="a\nb") == "a\n    b|a\n/// b"
