"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"ignore_files"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries without mutating either.

    - Mappings are merged recursively.
    - Lists in 'update' replace 'base' lists, except for ADDITIVE_KEYS
      which are unioned, deduplicated and sorted.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(current, list)
        ):
            result[key] = sorted({*current, *value})
        else:
            result[key] = value
    return result
