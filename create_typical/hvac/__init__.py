"""
HVAC-to-zone mapping support.

Usage:
    from create_typical.hvac import validate_zone_mapping, ZoneMappingError

    mapping = validate_zone_mapping("hvac_zone_mapping.json", zone_names)
"""

from .zone_mapping import (
    MappingErrorKind,
    ZoneMappingError,
    validate_zone_mapping,
    extract_zone_names,
    find_duplicate_zones,
    find_unknown_zones,
)

__all__ = [
    "MappingErrorKind",
    "ZoneMappingError",
    "validate_zone_mapping",
    "extract_zone_names",
    "find_duplicate_zones",
    "find_unknown_zones",
]
