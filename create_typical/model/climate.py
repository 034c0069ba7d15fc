"""
ASHRAE 169 climate zones and their representative weather stations.

"Lookup From Model" resolves the climate zone from what the model already
carries:
1. the climate type recorded in the .stat file next to the assigned EPW
2. the Site:Location name, matched against the representative stations

Models loaded from a geometry preset typically carry neither.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
import re
import logging

from eppy.modeleditor import IDF

from ..constants import CLIMATE_ZONES, CLIMATE_ZONE_PREFIX, LOOKUP_FROM_MODEL
from ..core.idf_parser import IDFParser, get_parser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherStation:
    """Representative TMY3 station for a climate zone."""
    filename_base: str
    wmo_id: str
    latitude: float
    longitude: float
    state_dir: str  # subdirectory on climate.onebuilding.org
    city: str


CLIMATE_ZONE_STATIONS: Dict[str, WeatherStation] = {
    '1A': WeatherStation('USA_FL_Miami.Intl.AP.722020_TMY3', '722020', 25.82, -80.30, 'FL_Florida', 'Miami'),
    '2A': WeatherStation('USA_TX_Houston-Bush.Intercontinental.AP.722430_TMY3', '722430', 29.98, -95.36, 'TX_Texas', 'Houston'),
    '2B': WeatherStation('USA_AZ_Phoenix-Sky.Harbor.Intl.AP.722780_TMY3', '722780', 33.45, -111.98, 'AZ_Arizona', 'Phoenix'),
    '3A': WeatherStation('USA_TN_Memphis.Intl.AP.723340_TMY3', '723340', 35.06, -89.99, 'TN_Tennessee', 'Memphis'),
    '3B': WeatherStation('USA_TX_El.Paso.Intl.AP.722700_TMY3', '722700', 31.81, -106.38, 'TX_Texas', 'El Paso'),
    '3C': WeatherStation('USA_CA_San.Francisco.Intl.AP.724940_TMY3', '724940', 37.62, -122.40, 'CA_California', 'San Francisco'),
    '4A': WeatherStation('USA_MD_Baltimore-Washington.Intl.AP.724060_TMY3', '724060', 39.17, -76.68, 'MD_Maryland', 'Baltimore'),
    '4B': WeatherStation('USA_NM_Albuquerque.Intl.AP.723650_TMY3', '723650', 35.04, -106.62, 'NM_New_Mexico', 'Albuquerque'),
    '4C': WeatherStation('USA_OR_Salem-McNary.Field.726940_TMY3', '726940', 44.91, -123.00, 'OR_Oregon', 'Salem'),
    '5A': WeatherStation('USA_IL_Chicago-OHare.Intl.AP.725300_TMY3', '725300', 41.98, -87.92, 'IL_Illinois', 'Chicago'),
    '5B': WeatherStation('USA_ID_Boise.Air.Terminal.726810_TMY3', '726810', 43.57, -116.22, 'ID_Idaho', 'Boise'),
    '6A': WeatherStation('USA_VT_Burlington.Intl.AP.726170_TMY3', '726170', 44.47, -73.15, 'VT_Vermont', 'Burlington'),
    '6B': WeatherStation('USA_MT_Helena.Rgnl.AP.727720_TMY3', '727720', 46.61, -111.96, 'MT_Montana', 'Helena'),
    '7A': WeatherStation('USA_MN_Duluth.Intl.AP.727450_TMY3', '727450', 46.84, -92.19, 'MN_Minnesota', 'Duluth'),
    '8A': WeatherStation('USA_AK_Fairbanks.Intl.AP.702610_TMY3', '702610', 64.82, -147.86, 'AK_Alaska', 'Fairbanks'),
}

# e.g.  - Climate type "5A" (ASHRAE Standard 196-2006 Climate Zone)**
STAT_CLIMATE_TYPE_PATTERN = re.compile(r'Climate type "(?P<code>[1-8][A-C]?)" \(ASHRAE Standard')


def normalize_climate_zone(code: str) -> Optional[str]:
    """
    Turn a short code ("5A", "7") or a full name into an enumerated climate zone.

    Returns None when the code is not one of ``CLIMATE_ZONES``.
    """
    if not code:
        return None
    code = code.strip()
    if code in CLIMATE_ZONES and code != LOOKUP_FROM_MODEL:
        return code

    code = code.upper()
    # Zones 7 and 8 have no moisture subtype; the enumeration files them under A
    if code in ('7', '8'):
        code = f"{code}A"

    full = f"{CLIMATE_ZONE_PREFIX}{code}"
    return full if full in CLIMATE_ZONES else None


def short_code(climate_zone: str) -> str:
    """'ASHRAE 169-2013-5A' -> '5A'."""
    return climate_zone.replace(CLIMATE_ZONE_PREFIX, '')


def station_for_climate_zone(climate_zone: str) -> WeatherStation:
    """
    Representative weather station for a climate zone.

    Raises:
        ValueError: If the climate zone is not recognized
    """
    normalized = normalize_climate_zone(climate_zone)
    if normalized is None:
        raise ValueError(f"Unknown climate zone: {climate_zone}")
    return CLIMATE_ZONE_STATIONS[short_code(normalized)]


def climate_zone_from_stat(stat_path: Path) -> Optional[str]:
    """Read the ASHRAE climate type from an EnergyPlus .stat file."""
    try:
        text = stat_path.read_text(encoding='latin-1')
    except OSError as e:
        logger.debug(f"Could not read {stat_path}: {e}")
        return None

    match = STAT_CLIMATE_TYPE_PATTERN.search(text)
    if not match:
        return None
    return normalize_climate_zone(match.group('code'))


def climate_zone_from_location(location_name: str) -> Optional[str]:
    """Match a Site:Location name against the representative stations."""
    if not location_name:
        return None
    name = location_name.lower()
    for code, station in CLIMATE_ZONE_STATIONS.items():
        if station.city.lower() in name or station.wmo_id in name:
            return normalize_climate_zone(code)
    return None


def lookup_climate_zone(model: IDF, parser: Optional[IDFParser] = None) -> Optional[str]:
    """
    Find the climate zone the model already declares.

    Returns:
        An "ASHRAE 169-2013-XX" climate zone, or None if the model carries none
    """
    parser = parser or get_parser()

    epw = parser.get_weather_file(model)
    if epw is not None:
        climate_zone = climate_zone_from_stat(epw.with_suffix('.stat'))
        if climate_zone:
            logger.debug(f"Climate zone {climate_zone} read from {epw.with_suffix('.stat')}")
            return climate_zone

    location_name = parser.get_site_location_name(model)
    climate_zone = climate_zone_from_location(location_name or '')
    if climate_zone:
        logger.debug(f"Climate zone {climate_zone} matched from location '{location_name}'")
    return climate_zone
