"""Deep merge of raw configuration mappings.

Features:
- Recursive mapping merge, inputs never mutated
- List override semantics:
  - Default: replace list entirely
  - First element "+": append remaining items to the base list
  - First element "=": explicit replace with remaining items
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Recursively merge mappings without mutating inputs.

    Args:
        base: Base mapping (lower priority)
        override: Override mapping (higher priority)

    Returns:
        New merged dict

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = merge_lists(current, value)
        else:
            result[key] = value
    return result


def merge_lists(base: list[Any], override: list[Any]) -> list[Any]:
    """Merge lists with override semantics.

    Example:
        >>> merge_lists([1, 2], [3, 4])
        [3, 4]
        >>> merge_lists([1, 2], ["+", 3, 4])
        [1, 2, 3, 4]
        >>> merge_lists([1, 2], ["=", 3])
        [3]
    """
    if override and isinstance(override[0], str):
        if override[0] == "+":
            return [*base, *override[1:]]
        if override[0] == "=":
            return list(override[1:])
    return list(override)


__all__ = ["deep_merge", "merge_lists"]
