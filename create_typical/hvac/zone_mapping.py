"""
HVAC-to-zone mapping validation.

A mapping document assigns groups of thermal zones to HVAC systems:

    {
      "systems": [
        {"thermal_zones": ["Zone1", "Zone2"]},
        {"thermal_zones": ["Zone3"]}
      ]
    }

Checks run in a fixed order and stop at the first failure:
existence -> syntax -> schema -> non-emptiness -> duplicates -> references.

Usage:
    from create_typical.hvac.zone_mapping import validate_zone_mapping, ZoneMappingError

    try:
        mapping = validate_zone_mapping(path, {"Zone1", "Zone2", "Zone3"})
    except ZoneMappingError as e:
        print(e.kind, e.zones)
"""

import json
from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

logger = logging.getLogger(__name__)


class MappingErrorKind(Enum):
    """Reason a mapping document was rejected."""

    PATH_NOT_FOUND = "path_not_found"
    MALFORMED_JSON = "malformed_json"
    INVALID_SCHEMA = "invalid_schema"
    EMPTY_MAPPING = "empty_mapping"
    DUPLICATE_ZONES = "duplicate_zones"
    UNKNOWN_ZONES = "unknown_zones"


class ZoneMappingError(ValueError):
    """Raised when an HVAC-to-zone mapping document fails validation."""

    def __init__(
        self,
        kind: MappingErrorKind,
        message: str,
        path: Union[str, Path] = "",
        zones: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.path = str(path)
        self.zones = zones or []


def extract_zone_names(document: Any) -> List[str]:
    """
    Flatten ``systems[*].thermal_zones`` into one list, in document order.

    Raises:
        TypeError: If the document does not have the expected shape
    """
    if not isinstance(document, dict):
        raise TypeError("mapping document must be a JSON object")

    systems = document.get("systems")
    if not isinstance(systems, list):
        raise TypeError("'systems' must be a list")

    zone_names = []
    for index, system in enumerate(systems):
        if not isinstance(system, dict):
            raise TypeError(f"systems[{index}] must be an object")
        zones = system.get("thermal_zones")
        if not isinstance(zones, list):
            raise TypeError(f"systems[{index}].thermal_zones must be a list")
        for zone in zones:
            if not isinstance(zone, str):
                raise TypeError(f"systems[{index}].thermal_zones must only hold strings")
        zone_names.extend(zones)

    return zone_names


def find_duplicate_zones(zone_names: Iterable[str]) -> List[str]:
    """Zone names occurring more than once, in first-seen order."""
    counts = Counter(zone_names)
    return [zone for zone, count in counts.items() if count > 1]


def find_unknown_zones(zone_names: Iterable[str], known_zone_names: Iterable[str]) -> List[str]:
    """Zone names missing from ``known_zone_names``, deduplicated, in first-seen order."""
    known = set(known_zone_names)
    return list(dict.fromkeys(zone for zone in zone_names if zone not in known))


def validate_zone_mapping(
    document_path: Union[str, Path],
    known_zone_names: Iterable[str],
) -> Dict[str, Any]:
    """
    Validate an HVAC-to-zone mapping file against the zones of a model.

    Args:
        document_path: Path to the mapping JSON file
        known_zone_names: Zone names present in the current model (case sensitive)

    Returns:
        The parsed document, unchanged

    Raises:
        ZoneMappingError: On the first failed check
    """
    path = Path(document_path)
    not_found_message = (
        f"The input user data path {document_path} is not a valid file path! "
        "Please provide a valid file path."
    )

    if not path.is_file():
        raise ZoneMappingError(MappingErrorKind.PATH_NOT_FOUND, not_found_message, path=document_path)

    logger.debug(f"Reading in HVAC mapping information from {document_path}.")

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ZoneMappingError(
            MappingErrorKind.PATH_NOT_FOUND, not_found_message, path=document_path
        ) from e

    try:
        document = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ZoneMappingError(
            MappingErrorKind.MALFORMED_JSON,
            f"Error in '{document_path}'. JSON parser failed to read file ({e}). "
            f"Ensure {document_path} is a valid JSON file",
            path=document_path,
        ) from e

    try:
        zone_names = extract_zone_names(document)
    except TypeError as e:
        raise ZoneMappingError(
            MappingErrorKind.INVALID_SCHEMA,
            f"Error in '{document_path}'. Ensure JSON follows the format specified under "
            f"'systems'.[].'thermal_zones' ({e})",
            path=document_path,
        ) from e

    if not zone_names:
        raise ZoneMappingError(
            MappingErrorKind.EMPTY_MAPPING,
            f"Error in {document_path}. No zones specified under 'systems'.[].'thermal_zones'",
            path=document_path,
        )

    duplicates = find_duplicate_zones(zone_names)
    if duplicates:
        raise ZoneMappingError(
            MappingErrorKind.DUPLICATE_ZONES,
            f"Error in {document_path}. Duplicate zones found: {', '.join(duplicates)}",
            path=document_path,
            zones=duplicates,
        )

    unknown = find_unknown_zones(zone_names, known_zone_names)
    if unknown:
        raise ZoneMappingError(
            MappingErrorKind.UNKNOWN_ZONES,
            f"Error in {document_path}. The following zones don't exist in the model: "
            f"{', '.join(unknown)}. NOTE, zone names are case sensitive.",
            path=document_path,
            zones=unknown,
        )

    logger.debug(f"No issues found in: {document_path}.")
    return document
