"""propath - Property-path resolution for nested Python data."""

from __future__ import annotations

# Core operations
from propath.access import get
from propath.existence import has, has_in
from propath.invoker import invoke, method
from propath.tokenizer import is_deep_key, to_path

# Key helpers
from propath.utils.keys import MAX_SAFE_INTEGER, is_index, to_key
from propath.utils.sequences import is_arguments, last

# Path shapes and containers
from propath.path import KeySequence, SingleKey, StringPath
from propath.types import MISSING, Arguments, SparseList

# Resolver and config
from propath.config import Config, ResolverSettings
from propath.resolver import PathResolver

# Errors
from propath.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    PathError,
    PathParseError,
    UnsupportedPathError,
)

__version__ = "0.1.0"

__all__ = [
    # Core operations
    "get",
    "has",
    "has_in",
    "invoke",
    "method",
    "is_deep_key",
    "to_path",
    # Key helpers
    "MAX_SAFE_INTEGER",
    "is_index",
    "to_key",
    "is_arguments",
    "last",
    # Path shapes and containers
    "KeySequence",
    "SingleKey",
    "StringPath",
    "MISSING",
    "Arguments",
    "SparseList",
    # Resolver and config
    "Config",
    "ResolverSettings",
    "PathResolver",
    # Errors
    "ErrorCodes",
    "PathError",
    "PathParseError",
    "UnsupportedPathError",
    "ConfigError",
    "ConfigNotFoundError",
]
