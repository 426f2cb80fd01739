"""PathResolver: configured facade over the path engine."""

from __future__ import annotations

import logging
from typing import Any

from propath import access, existence, invoker
from propath.config import Config, ResolverSettings
from propath.errors import UnsupportedPathError
from propath.tokenizer import to_path
from propath.utils.keys import is_number
from propath.utils.sequences import flatten_args

__all__ = ["PathResolver"]

_logger = logging.getLogger(__name__)


class PathResolver:
    """Runs path operations under a fixed set of :class:`ResolverSettings`.

    The module-level functions (``propath.has``, ``propath.invoke`` ...)
    behave like a resolver with default settings. A strict resolver refuses
    path values outside ``str | int | float | list | tuple`` and unhashable
    keys inside sequences.

    Example:
        resolver = PathResolver(ResolverSettings(strict_paths=True))
        resolver.has({"a": [1]}, "a[0]")  # True
        resolver.has({"a": [1]}, object())  # raises UnsupportedPathError
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self._settings: ResolverSettings = settings or ResolverSettings()

    @classmethod
    def from_config(cls, config: Config, key: str = "resolver") -> PathResolver:
        """Build a resolver from the settings section of ``config``."""
        return cls(config.resolver_settings(key))

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def _check(self, path: Any) -> None:
        if not self._settings.strict_paths:
            return
        if isinstance(path, str) or is_number(path):
            return
        if isinstance(path, (list, tuple)):
            for key in path:
                try:
                    hash(key)
                except TypeError as e:
                    raise UnsupportedPathError(path, cause=e) from e
            return
        raise UnsupportedPathError(path)

    def _miss(self, operation: str, path: Any) -> None:
        if self._settings.log_misses:
            _logger.debug("%s found nothing at path %r", operation, path)

    def to_path(self, path: str) -> list[str | int]:
        return to_path(path)

    def get(self, object: Any, path: Any, default: Any = None) -> Any:
        self._check(path)
        return access.get(object, path, default)

    def has(self, object: Any, path: Any) -> bool:
        """Strict mode may raise :class:`UnsupportedPathError`; otherwise never raises."""
        self._check(path)
        found = existence.has(object, path)
        if not found:
            self._miss("has", path)
        return found

    def has_in(self, object: Any, path: Any) -> bool:
        self._check(path)
        found = existence.has_in(object, path)
        if not found:
            self._miss("has_in", path)
        return found

    def invoke(self, object: Any, path: Any, *args: Any) -> Any:
        self._check(path)
        flat_args = flatten_args(args)
        func = invoker.resolve_callable(object, path)
        if func is None:
            self._miss("invoke", path)
            return None
        return func(*flat_args)
