"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from propath.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    PathError,
    PathParseError,
    UnsupportedPathError,
)


class TestPathError:
    def test_str_includes_code(self) -> None:
        err = PathError(code="X", message="something")
        assert str(err) == "[X] something"
        assert err.details == {}
        assert err.cause is None

    def test_parse_error_details(self) -> None:
        err = PathParseError("a[", 1, "unterminated '['")
        assert err.code == ErrorCodes.PATH_PARSE_ERROR
        assert err.details == {"path": "a[", "position": 1, "reason": "unterminated '['"}
        assert isinstance(err, PathError)
        assert isinstance(err, ValueError)

    def test_unsupported_path(self) -> None:
        err = UnsupportedPathError({1})
        assert err.code == ErrorCodes.PATH_UNSUPPORTED
        assert "set" in err.message
        assert isinstance(err, TypeError)

    def test_config_errors(self) -> None:
        cause = ValueError("bad")
        err = ConfigError("broken", cause=cause)
        assert err.code == ErrorCodes.CONFIG_INVALID
        assert err.cause is cause
        assert ConfigNotFoundError("x.yaml").details == {"config_path": "x.yaml"}


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().PATH_PARSE_ERROR = "other"
