"""Payload helpers shared by the orchestrator and transformers."""

import json
from typing import Any


def filter_nil_values(values: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively omit None values from a request body.

    The remote APIs reject explicit nulls for optional fields, so they must be
    left out instead. Nested mappings and lists that end up empty are dropped
    from their parent mapping; mappings inside a list are filtered but kept
    even when they become empty, so list positions are preserved.

    Args:
        values: Request body, left untouched

    Returns:
        A filtered copy
    """
    result: dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested = filter_nil_values(value)
            if nested:
                result[key] = nested
            continue
        if isinstance(value, list):
            items = [
                filter_nil_values(item) if isinstance(item, dict) else item
                for item in value
                if item is not None
            ]
            if items:
                result[key] = items
            continue
        result[key] = value
    return result


def stringify_id(value: Any) -> str:
    """Render an id field as a string, JSON numbers may decode as floats."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_json(values: Any) -> str:
    """Serialize properties for a result."""
    return json.dumps(values, separators=(",", ":"), sort_keys=True, default=str)
