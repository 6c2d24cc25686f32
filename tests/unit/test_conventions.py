"""
Unit tests for naming conventions.

Tests how package names are assumed from import paths by the minimal and
tool conventions, and the lookup of conventions by name.
"""

import pytest

from codepoet.imports.conventions import (
    DEFAULT_CONVENTION,
    MinimalConvention,
    NamingConvention,
    ToolConvention,
    available_conventions,
    get_convention,
    is_major_version,
)
from codepoet.utils.exceptions import ConfigurationError


class TestMinimalConvention:
    """Test the last-segment convention."""

    @pytest.mark.parametrize("import_path, expected", [
        ("foo.bar/fubar", "fubar"),
        ("fubar", "fubar"),
        ("example.com/foo/v2", "v2"),
        ("example.com/go-yaml", "go-yaml"),
        ("example.com/fizz-buzz", "fizz-buzz"),
        ("example.com/foo/", "foo"),
    ])
    def test_last_segment_verbatim(self, minimal_convention, import_path, expected):
        """Test that the last path segment is returned unchanged."""
        assert minimal_convention.assumed_name(import_path) == expected

    def test_degenerate_paths(self, minimal_convention):
        """Test that empty and separator-only paths do not raise."""
        assert minimal_convention.assumed_name("") == "."
        assert minimal_convention.assumed_name("///") == "/"

    def test_is_default(self):
        """Test that the documented default is the minimal convention."""
        assert isinstance(DEFAULT_CONVENTION, MinimalConvention)


class TestToolConvention:
    """Test the toolchain-style convention."""

    @pytest.mark.parametrize("import_path, expected", [
        ("foo.bar/fubar", "fubar"),
        ("example.com/foo/v2", "foo"),
        ("example.com/foo/v10/", "foo"),
        ("example.com/go-foo/v3", "foo"),
        ("github.com/x/go-yaml", "yaml"),
        ("gopkg.in/yaml.v3", "yaml"),
        ("example.com/fizz-buzz", "fizz"),
        ("example.com/fubar_v4", "fubar_v4"),
        ("example.com/héllo-wörld", "héllo"),
    ])
    def test_assumed_name(self, tool_convention, import_path, expected):
        """Test assumed names for common import path shapes."""
        assert tool_convention.assumed_name(import_path) == expected

    def test_version_without_parent_is_kept(self, tool_convention):
        """Test that a lone version segment is used as-is."""
        assert tool_convention.assumed_name("v2") == "v2"

    def test_version_under_root_yields_empty_name(self, tool_convention):
        """Test that a version directly under the root takes the root's empty name."""
        assert tool_convention.assumed_name("/v2") == ""
        assert tool_convention.assumed_name("/foo/v2") == "foo"

    def test_version_like_segments_are_not_versions(self, tool_convention):
        """Test that "v" alone and "v" plus non-digits are ordinary names."""
        assert tool_convention.assumed_name("example.com/v") == "v"
        assert tool_convention.assumed_name("example.com/vx1") == "vx1"

    def test_strips_single_repository_prefix(self, tool_convention):
        """Test that only one "go-" prefix is removed."""
        assert tool_convention.assumed_name("example.com/go-go-foo") == "go"

    def test_may_return_empty(self, tool_convention):
        """Test that nothing usable yields an empty name rather than an error."""
        assert tool_convention.assumed_name("example.com/go-") == ""
        assert tool_convention.assumed_name("example.com/-foo") == ""


class TestMajorVersion:
    """Test major version detection."""

    @pytest.mark.parametrize("segment, expected", [
        ("v2", True),
        ("v10", True),
        ("v", False),
        ("v2a", False),
        ("V2", False),
        ("v²", False),
        ("2", False),
    ])
    def test_is_major_version(self, segment, expected):
        assert is_major_version(segment) is expected


class TestConventionLookup:
    """Test lookup of conventions by name."""

    def test_available(self):
        """Test that both built-in conventions are listed."""
        assert available_conventions() == ["minimal", "tool"]

    def test_get_convention(self):
        """Test lookup is case and whitespace insensitive."""
        assert isinstance(get_convention("tool"), ToolConvention)
        assert isinstance(get_convention(" Minimal "), MinimalConvention)
        assert get_convention("minimal") is DEFAULT_CONVENTION

    def test_unknown_convention(self):
        """Test that an unknown name raises a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_convention("bogus")
        assert "bogus" in str(exc_info.value)
        assert "minimal, tool" in str(exc_info.value)

    @pytest.mark.parametrize("name", [5, None, ["tool"]])
    def test_non_string_name(self, name):
        """Test that a name which is not a string raises a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_convention(name)
        assert exc_info.value.details["available"] == "minimal, tool"

    def test_conventions_compare_by_type(self):
        """Test that conventions are interchangeable stateless values."""
        assert MinimalConvention() == MinimalConvention()
        assert MinimalConvention() != ToolConvention()
        assert len({MinimalConvention(), MinimalConvention(), ToolConvention()}) == 2

    def test_custom_convention(self):
        """Test that a user-defined convention can be plugged in."""
        class UpperConvention(NamingConvention):
            def assumed_name(self, import_path):
                return import_path.rsplit("/", 1)[-1].upper()

        assert UpperConvention().assumed_name("x/foo") == "FOO"

    def test_base_class_is_abstract(self):
        """Test that NamingConvention cannot be instantiated directly."""
        with pytest.raises(TypeError):
            NamingConvention()
