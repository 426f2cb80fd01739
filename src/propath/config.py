"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from propath.access import get
from propath.errors import ConfigError, ConfigNotFoundError
from propath.existence import has

__all__ = ["Config", "ResolverSettings"]

_logger = logging.getLogger(__name__)


class ResolverSettings(BaseModel):
    """Behaviour switches for :class:`~propath.resolver.PathResolver`.

    Attributes:
        strict_paths: Reject path values that are not a string, number, list
            or tuple instead of using them as raw keys.
        log_misses: Emit a DEBUG record when a lookup finds nothing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_paths: bool = False
    log_misses: bool = False


class Config:
    """Configuration accessor with dot/bracket path key support.

    Keys such as ``"resolver.strict_paths"`` or ``"sources[0].name"`` are
    resolved with the same rules as :func:`propath.get`.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, yaml_path: str | os.PathLike[str]) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or its top level is not a mapping.
        """
        path = os.fspath(yaml_path)
        if not os.path.isfile(path):
            raise ConfigNotFoundError(config_path=path)

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        _logger.debug("Loaded config from %s with %d top-level keys", path, len(data))
        return cls(data)

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str | list[Any], default: Any = None) -> Any:
        """Get a configuration value by path key."""
        return get(self._data, key, default)

    def has(self, key: str | list[Any]) -> bool:
        """Whether a configuration value exists at ``key`` (even if ``None``)."""
        return has(self._data, key)

    def resolver_settings(self, key: str = "resolver") -> ResolverSettings:
        """Validate the section at ``key`` into :class:`ResolverSettings`.

        A missing section yields default settings.

        Raises:
            ConfigError: If the section fails validation.
        """
        section = self.get(key, {})
        if not isinstance(section, dict):
            raise ConfigError(f"'{key}' must be a mapping, got {type(section).__name__}")
        try:
            return ResolverSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid resolver settings in '{key}': {e}", cause=e) from e
