"""
Weather file and design-day assignment.

Used when a model still has no weather file after typical-building
generation: the climate zone's representative station supplies the EPW,
the site location and the sizing design days.
"""

from typing import Any, List, Optional
import re
import logging

from eppy.modeleditor import IDF

from ..core.idf_parser import IDFParser, get_parser
from ..utils.weather_downloader import WeatherDownloader

logger = logging.getLogger(__name__)

# 99.6% heating and 0.4% cooling dry-bulb conditions
DESIGN_DAY_PATTERNS = [
    re.compile(r'Htg 99\.6% Condns DB$', re.IGNORECASE),
    re.compile(r'Clg \.4% Condns DB=>MWB$', re.IGNORECASE),
]


def select_design_days(design_days: List[Any]) -> List[Any]:
    """
    Pick the sizing design days out of a DDY file's design days.

    Falls back to every design day when none match the standard names.
    """
    selected = [
        dd for dd in design_days
        if any(p.search(getattr(dd, 'Name', '').strip()) for p in DESIGN_DAY_PATTERNS)
    ]
    if not selected and design_days:
        logger.warning("No standard design days found in DDY, using all of them")
        return list(design_days)
    return selected


def _replace_objects(model: IDF, key: str, replacements: List[Any]) -> None:
    for obj in list(model.idfobjects[key]):
        model.removeidfobject(obj)
    for obj in replacements:
        model.copyidfobject(obj)


def add_design_days_and_weather_file(
    model: IDF,
    climate_zone: str,
    downloader: Optional[WeatherDownloader] = None,
    parser: Optional[IDFParser] = None,
) -> str:
    """
    Assign the representative weather file of ``climate_zone`` to the model.

    Sets ``model.epw``, replaces the Site:Location and the sizing design days
    with those of the station's DDY file.

    Args:
        model: Model to update (mutated)
        climate_zone: Enumerated climate zone, e.g. "ASHRAE 169-2013-5A"
        downloader: Weather downloader (default: cached downloader from settings)
        parser: IDF parser to use

    Returns:
        Name of the assigned site location
    """
    downloader = downloader or WeatherDownloader()
    parser = parser or get_parser()

    files = downloader.get_or_download(climate_zone)
    ddy = parser.load(files.ddy)

    locations = list(ddy.idfobjects['SITE:LOCATION'])
    design_days = select_design_days(list(ddy.idfobjects['SIZINGPERIOD:DESIGNDAY']))

    if locations:
        _replace_objects(model, 'SITE:LOCATION', locations[:1])
    _replace_objects(model, 'SIZINGPERIOD:DESIGNDAY', design_days)

    model.epw = str(files.epw)

    location_name = parser.get_site_location_name(model) or files.epw.stem
    logger.info(
        f"Assigned {files.epw.name} with {len(design_days)} design days",
        extra={"climate_zone": climate_zone},
    )
    return location_name
