"""Region code helpers."""

import re

_REGION_SUFFIX = re.compile(r"-?\d+$")


def derive_short_region(region: str) -> str:
    """
    Strip the trailing availability-zone number from a region code.

    Compute and network APIs use long codes (DE1, GRA7, US-EAST-VA-1) while
    storage and database APIs use the short form (DE, GRA, US-EAST-VA).
    Codes that are already short are returned unchanged.
    """
    if not region:
        return ""
    return _REGION_SUFFIX.sub("", region)
