"""Key and sequence helpers shared by the path engine."""

from __future__ import annotations

from propath.utils.keys import MAX_SAFE_INTEGER, is_index, to_key
from propath.utils.sequences import flatten_args, is_arguments, last

__all__ = ["MAX_SAFE_INTEGER", "is_index", "to_key", "flatten_args", "is_arguments", "last"]
