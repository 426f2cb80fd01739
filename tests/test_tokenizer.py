"""Tests for the string path tokenizer."""

from __future__ import annotations

import pytest

from propath.errors import ErrorCodes, PathParseError
from propath.tokenizer import is_deep_key, to_path


class TestIsDeepKey:
    @pytest.mark.parametrize("key", ["a.b", "a[0]", "a['b.c']", ".a", "a]"])
    def test_deep_keys(self, key: str) -> None:
        assert is_deep_key(key) is True

    @pytest.mark.parametrize("key", ["a", "123", "", "a-b c"])
    def test_flat_keys(self, key: str) -> None:
        assert is_deep_key(key) is False

    @pytest.mark.parametrize("key", [1, 1.5, None, ("a.b",)])
    def test_non_strings_are_never_deep(self, key: object) -> None:
        assert is_deep_key(key) is False


class TestToPathSegments:
    def test_dotted(self) -> None:
        assert to_path("a.b.c") == ["a", "b", "c"]

    def test_single_segment(self) -> None:
        assert to_path("a") == ["a"]

    def test_empty_string(self) -> None:
        assert to_path("") == []

    def test_plain_numeric_segment_stays_string(self) -> None:
        assert to_path("a.0.b") == ["a", "0", "b"]

    def test_leading_trailing_and_repeated_dots_dropped(self) -> None:
        assert to_path(".a..b.") == ["a", "b"]

    def test_unicode_and_spaces(self) -> None:
        assert to_path("héllo.wor ld") == ["héllo", "wor ld"]


class TestToPathBrackets:
    def test_index_becomes_int(self) -> None:
        assert to_path("a[0].b") == ["a", 0, "b"]

    def test_consecutive_brackets(self) -> None:
        assert to_path("a[0][1]") == ["a", 0, 1]

    def test_leading_bracket(self) -> None:
        assert to_path("[2].x") == [2, "x"]

    def test_non_index_content_is_string(self) -> None:
        assert to_path("a[b]") == ["a", "b"]
        assert to_path("a[-1]") == ["a", "-1"]
        assert to_path("a[01]") == ["a", "01"]

    def test_single_quoted(self) -> None:
        assert to_path("a['b.c']") == ["a", "b.c"]

    def test_double_quoted(self) -> None:
        assert to_path('a["b[0]"].d') == ["a", "b[0]", "d"]

    def test_quoted_digits_stay_string(self) -> None:
        assert to_path("a['0']") == ["a", "0"]

    def test_quoted_empty_string(self) -> None:
        assert to_path("a['']") == ["a", ""]

    def test_escaped_quote_inside_quotes(self) -> None:
        assert to_path(r"a['it\'s']") == ["a", "it's"]

    def test_other_quote_kind_is_literal(self) -> None:
        assert to_path("""a["it's"]""") == ["a", "it's"]

    def test_empty_unquoted_brackets_dropped(self) -> None:
        assert to_path("a[].b") == ["a", "b"]

    def test_segment_directly_after_bracket(self) -> None:
        assert to_path("a[0]b") == ["a", 0, "b"]


class TestToPathEscapes:
    def test_escaped_dot(self) -> None:
        assert to_path(r"a\.b.c") == ["a.b", "c"]

    def test_escaped_brackets(self) -> None:
        assert to_path(r"a\[0\]") == ["a[0]"]

    def test_other_backslashes_kept(self) -> None:
        assert to_path(r"a\nb") == [r"a\nb"]

    def test_stray_closing_bracket_is_literal(self) -> None:
        assert to_path("a]b") == ["a]b"]
        assert to_path("a[0]]") == ["a", 0, "]"]
        assert to_path("]") == ["]"]


class TestToPathErrors:
    def test_unterminated_bracket(self) -> None:
        with pytest.raises(PathParseError) as exc_info:
            to_path("a[0")
        assert exc_info.value.code == ErrorCodes.PATH_PARSE_ERROR
        assert exc_info.value.path == "a[0"
        assert exc_info.value.position == 1

    def test_unterminated_quote(self) -> None:
        with pytest.raises(PathParseError, match="unterminated"):
            to_path("a['b]")

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            to_path("[")


class TestToPathCache:
    def test_returns_fresh_list(self) -> None:
        first = to_path("x.y")
        first.append("z")
        assert to_path("x.y") == ["x", "y"]
