"""Model manipulation: geometry presets, overwrite and climate zone lookup.

Weather assignment lives in ``create_typical.model.weather``.
"""

from .overwrite import overwrite_existing_model
from .geometry import list_geometry_presets, resolve_geometry_path, load_geometry_model
from .climate import (
    WeatherStation,
    CLIMATE_ZONE_STATIONS,
    normalize_climate_zone,
    station_for_climate_zone,
    climate_zone_from_stat,
    climate_zone_from_location,
    lookup_climate_zone,
)

__all__ = [
    "overwrite_existing_model",
    "list_geometry_presets",
    "resolve_geometry_path",
    "load_geometry_model",
    "WeatherStation",
    "CLIMATE_ZONE_STATIONS",
    "normalize_climate_zone",
    "station_for_climate_zone",
    "climate_zone_from_stat",
    "climate_zone_from_location",
    "lookup_climate_zone",
]
