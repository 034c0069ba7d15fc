"""
User arguments of the Create Typical Building measure.
"""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    CLIMATE_ZONES,
    DEFAULT_HVAC_JSON_PATH,
    DEFAULT_TEMPLATE,
    EXISTING_GEOMETRY,
    GEOMETRY_FILES,
    HVAC_TYPES,
    INFERRED,
    LOOKUP_FROM_MODEL,
    STANDARD_ENERGY_CODES,
)


@dataclass(frozen=True)
class ArgumentDefinition:
    """How an argument is presented to the user."""
    name: str
    display_name: str
    default: Optional[str]
    required: bool = True
    choices: Optional[List[str]] = None
    description: str = ""


def _check_choice(value: str, choices: List[str], label: str) -> str:
    if value not in choices:
        raise ValueError(f"'{value}' is not a valid {label}")
    return value


class MeasureArguments(BaseModel):
    """Validated measure arguments."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    geometry_file: str = Field(default=EXISTING_GEOMETRY, description="Geometry preset")
    climate_zone: str = Field(default=LOOKUP_FROM_MODEL, description="ASHRAE 169 climate zone")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Building energy code")
    hvac_type: str = Field(default=INFERRED, description="HVAC system type")
    user_hvac_json_path: Optional[str] = Field(
        default=DEFAULT_HVAC_JSON_PATH, description="HVAC-to-zone mapping JSON path"
    )

    @field_validator("geometry_file")
    @classmethod
    def check_geometry_file(cls, v: str) -> str:
        return _check_choice(v, GEOMETRY_FILES, "geometry file")

    @field_validator("climate_zone")
    @classmethod
    def check_climate_zone(cls, v: str) -> str:
        return _check_choice(v, CLIMATE_ZONES, "climate zone")

    @field_validator("template")
    @classmethod
    def check_template(cls, v: str) -> str:
        return _check_choice(v, STANDARD_ENERGY_CODES, "building energy code")

    @field_validator("hvac_type")
    @classmethod
    def check_hvac_type(cls, v: str) -> str:
        return _check_choice(v, HVAC_TYPES, "HVAC type")


def argument_definitions() -> List[ArgumentDefinition]:
    """Arguments offered to the user, in display order."""
    return [
        ArgumentDefinition('geometry_file', 'Geometry File', EXISTING_GEOMETRY, choices=list(GEOMETRY_FILES)),
        ArgumentDefinition('climate_zone', 'Climate Zone', LOOKUP_FROM_MODEL, choices=list(CLIMATE_ZONES)),
        ArgumentDefinition('template', 'Building Energy Code', DEFAULT_TEMPLATE, choices=list(STANDARD_ENERGY_CODES)),
        ArgumentDefinition('hvac_type', 'HVAC Type', INFERRED, choices=list(HVAC_TYPES)),
        ArgumentDefinition(
            'user_hvac_json_path',
            'HVAC Zone Mapping JSON Path:',
            DEFAULT_HVAC_JSON_PATH,
            required=False,
            description='Required if "JSON specified" is selected for "HVAC Type". Please '
                        'enter a valid absolute path to a HVAC-to-Zone mapping JSON.',
        ),
    ]
