"""
Tests for the path model and path string grammar.

Focus Areas:
1. Parsing keys, indices, quoted keys and escapes
2. Rejection of malformed paths with positions
3. Canonical rendering and parse/render stability
"""

import pytest

from toml_query.core.path_utils import (
    MapKey,
    Path,
    PathParser,
    SequenceIndex,
    as_path,
)
from toml_query.exceptions import PathParseError


class TestParse:
    """Test parsing of well-formed path strings."""

    def test_dotted_keys(self):
        """Dotted keys become key steps in order."""
        assert PathParser.parse("a.b.c") == (MapKey("a"), MapKey("b"), MapKey("c"))

    def test_bracketed_index(self):
        """A bracketed index after a key becomes an index step."""
        assert PathParser.parse("a[0].b") == (
            MapKey("a"),
            SequenceIndex(0),
            MapKey("b"),
        )

    def test_index_as_own_segment(self):
        """The `a.[0]` form is accepted as well."""
        assert PathParser.parse("a.[0].b") == PathParser.parse("a[0].b")

    def test_consecutive_indices(self):
        assert PathParser.parse("matrix[1][2]") == (
            MapKey("matrix"),
            SequenceIndex(1),
            SequenceIndex(2),
        )

    def test_leading_index(self):
        """A path may start with an index when the root is an array."""
        assert PathParser.parse("[3].name") == (SequenceIndex(3), MapKey("name"))

    def test_index_with_whitespace(self):
        assert PathParser.parse("a[ 12 ]") == (MapKey("a"), SequenceIndex(12))

    def test_double_quoted_key_keeps_separator(self):
        assert PathParser.parse('servers."alpha.example".ip') == (
            MapKey("servers"),
            MapKey("alpha.example"),
            MapKey("ip"),
        )

    def test_double_quoted_key_escapes(self):
        assert PathParser.parse(r'"say \"hi\""') == (MapKey('say "hi"'),)

    def test_single_quoted_key_is_literal(self):
        assert PathParser.parse(r"'C:\temp'.x") == (MapKey("C:\\temp"), MapKey("x"))

    def test_escaped_separator_in_bare_key(self):
        assert PathParser.parse(r"a\.b.c") == (MapKey("a.b"), MapKey("c"))

    def test_empty_quoted_key(self):
        assert PathParser.parse('a."".b') == (
            MapKey("a"),
            MapKey("", quoted=True),
            MapKey("b"),
        )

    def test_empty_string_is_root(self):
        assert PathParser.parse("") == ()
        assert Path.parse("").is_root

    def test_custom_separator(self):
        """Keys may contain dots when another separator is used."""
        assert PathParser.parse("a/b.c/[1]", "/") == (
            MapKey("a"),
            MapKey("b.c"),
            SequenceIndex(1),
        )


class TestParseErrors:
    """Test rejection of malformed path strings."""

    @pytest.mark.parametrize(
        "text,position",
        [
            ("a[", 1),
            ("a[0", 1),
            ("a[x]", 1),
            ("a[-1]", 1),
            ("a[]", 1),
            ("a..b", 2),
            (".a", 0),
            ("a.", 2),
            ("a[0]b", 4),
            ('"a', 0),
            ("a]", 1),
            ("a\\", 1),
        ],
    )
    def test_malformed(self, text, position):
        """Each malformed path fails with the offending character position."""
        with pytest.raises(PathParseError) as exc_info:
            PathParser.parse(text)

        assert exc_info.value.path == text
        assert exc_info.value.position == position

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Path.parse("a[")

    @pytest.mark.parametrize("separator", ["", "..", "[", '"', "\\", " "])
    def test_invalid_separator(self, separator):
        with pytest.raises(PathParseError):
            PathParser.parse("a", separator)


class TestSteps:
    """Test step construction invariants."""

    def test_negative_index_rejected(self):
        with pytest.raises(PathParseError):
            SequenceIndex(-1)

    def test_bool_index_rejected(self):
        with pytest.raises(PathParseError):
            SequenceIndex(True)

    def test_unquoted_empty_key_rejected(self):
        with pytest.raises(PathParseError):
            MapKey("")

    def test_quoted_flag_ignored_in_equality(self):
        assert MapKey("a", quoted=True) == MapKey("a")


class TestRender:
    """Test canonical rendering."""

    def test_render_simple(self):
        assert str(Path.parse("a.[0].b")) == "a[0].b"

    def test_render_quotes_special_keys(self):
        assert str(Path.of("a.b", 'q"x', "plain")) == '"a.b"."q\\"x".plain'

    def test_render_custom_separator(self):
        path = Path.parse("a/b.c/[1]", "/")
        assert path.render("/") == 'a/"b.c"[1]'
        assert path.render() == 'a."b.c"[1]'

    @pytest.mark.parametrize(
        "text",
        [
            "a",
            "a.b.c",
            "a[0].b",
            "[0][1]",
            'servers."alpha.example".ip',
            r"a\.b.c",
            "'lit eral'.x",
            'a."".b',
            "key-with_dash.v2",
            r'"back\\slash"',
        ],
    )
    def test_parse_render_parse_is_stable(self, text):
        """Rendering a parsed path and parsing it again gives the same steps."""
        steps = PathParser.parse(text)
        assert PathParser.parse(PathParser.render(steps)) == steps


class TestPath:
    """Test Path helpers."""

    def test_equality_ignores_text(self):
        assert Path.parse("a.[0]") == Path.parse("a[0]")

    def test_parent_and_last(self):
        path = Path.parse("a.b[2]")
        assert path.parent == Path.parse("a.b")
        assert path.last == SequenceIndex(2)

    def test_root_has_no_parent(self):
        with pytest.raises(PathParseError):
            Path.parse("").parent

    def test_child(self):
        path = Path.parse("a").child("b").child(0)
        assert str(path) == "a.b[0]"

    def test_prefix_and_len(self):
        path = Path.parse("a.b.c")
        assert len(path) == 3
        assert str(path.prefix(2)) == "a.b"
        assert list(path) == [MapKey("a"), MapKey("b"), MapKey("c")]

    def test_of_does_not_parse(self):
        assert Path.of("a.b").steps == (MapKey("a.b"),)

    def test_as_path_passthrough(self):
        path = Path.parse("x")
        assert as_path(path) is path
        assert as_path("x") == path

    def test_as_path_rejects_other_types(self):
        with pytest.raises(PathParseError):
            as_path(42)
