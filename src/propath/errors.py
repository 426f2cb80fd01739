"""Error hierarchy for the propath library."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PathError",
    "PathParseError",
    "UnsupportedPathError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class PathError(Exception):
    """Base error for all propath errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PathParseError(PathError, ValueError):
    """Raised when a string path has malformed bracket syntax."""

    def __init__(self, path: str, position: int, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_PARSE_ERROR",
            message=f"Cannot parse path {path!r} at position {position}: {reason}",
            details={"path": path, "position": position, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path string that failed to parse."""
        return self.details["path"]

    @property
    def position(self) -> int:
        """Index of the offending character in the path string."""
        return self.details["position"]


class UnsupportedPathError(PathError, TypeError):
    """Raised by a strict resolver when a path value has an unsupported shape."""

    def __init__(self, path: Any, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_UNSUPPORTED",
            message=f"Unsupported path of type {type(path).__name__}: {path!r}",
            details={"path": path},
            **kwargs,
        )


class ConfigNotFoundError(PathError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PathError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.PATH_PARSE_ERROR:
            report_bad_path(error.details["path"])
    """

    PATH_PARSE_ERROR = "PATH_PARSE_ERROR"
    PATH_UNSUPPORTED = "PATH_UNSUPPORTED"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
