"""Helpers for per-target configuration documents.

Target configuration is the JSON object the host attaches to every request.
Scope values may be spelled several ways depending on where the document was
produced, so lookups walk an ordered alias list and take the first non-empty
string.
"""

import json
from typing import Any, Optional, Union

PROJECT_FIELDS = ("ProjectId", "projectId", "ServiceName", "serviceName")
REGION_FIELDS = ("Region", "region", "RegionName", "regionName")
LOCATION_FIELDS = ("Location", "location")
ZONE_FIELDS = ("Zone", "zone", "ZoneName", "zoneName")

SERVICE_NAME_KEY = "serviceName"


def decode_json_object(raw: Union[str, bytes, dict[str, Any], None]) -> dict[str, Any]:
    """
    Decode a JSON document into a dict.

    Args:
        raw: JSON text, bytes, an already decoded mapping, or None

    Returns:
        The decoded object, empty for None or blank input

    Raises:
        ValueError: If the input is not valid JSON or not a JSON object
    """
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return dict(raw)
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if not raw.strip():
        return {}
    decoded = json.loads(raw)
    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
    return decoded


def first_string(values: dict[str, Any], fields: tuple[str, ...]) -> str:
    """Return the first non-empty string value among ``fields``, or ''."""
    for field in fields:
        value = values.get(field)
        if isinstance(value, str) and value:
            return value
    return ""


def extract_project(values: dict[str, Any]) -> str:
    return first_string(values, PROJECT_FIELDS)


def extract_region(values: dict[str, Any]) -> str:
    return first_string(values, REGION_FIELDS)


def extract_location(values: dict[str, Any]) -> str:
    return first_string(values, LOCATION_FIELDS)


def extract_zone(values: dict[str, Any]) -> str:
    return first_string(values, ZONE_FIELDS)


def augment_target_config(
    target_config: Union[str, bytes, dict[str, Any], None], project_id: Optional[str]
) -> dict[str, Any]:
    """
    Inject the configured project as ``serviceName``.

    The configured project replaces any ``serviceName`` already present;
    a ``ProjectId``/``projectId`` entry still takes precedence at lookup.

    Args:
        target_config: Raw target configuration
        project_id: Project configured on the engine, may be None

    Returns:
        Decoded and augmented target configuration
    """
    values = decode_json_object(target_config)
    if project_id:
        values[SERVICE_NAME_KEY] = project_id
    return values
