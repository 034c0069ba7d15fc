"""
Pytest configuration and fixtures for Create Typical Building tests.

Provides reusable test fixtures for:
- eppy IDD setup (eppy's bundled IDD, no EnergyPlus install needed)
- Sample models and geometry presets
- Mapping documents
- Fake generator and weather downloader
"""

import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from eppy.iddcurrent import iddcurrent
from eppy.modeleditor import IDF

from create_typical.core.idf_parser import IDFParser
from create_typical.utils.weather_downloader import WeatherFiles


if IDF.getiddname() is None:
    IDF.setiddname(StringIO(iddcurrent.iddtxt))


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def parser() -> IDFParser:
    return IDFParser()


@pytest.fixture
def sample_idf_content() -> str:
    """Small three-zone office."""
    return '''
Building,
    Small Office,            !- Name
    0,                       !- North Axis {deg}
    City,                    !- Terrain
    0.04,                    !- Loads Convergence Tolerance Value
    0.4,                     !- Temperature Convergence Tolerance Value {deltaC}
    FullInteriorAndExterior, !- Solar Distribution
    25,                      !- Maximum Number of Warmup Days
    6;                       !- Minimum Number of Warmup Days

Zone,
    Core_ZN;                 !- Name

Zone,
    Perimeter_ZN_1;          !- Name

Zone,
    Perimeter_ZN_2;          !- Name
'''


@pytest.fixture
def sample_model(parser, sample_idf_content) -> IDF:
    return parser.load_string(sample_idf_content)


@pytest.fixture
def make_model(parser):
    """Factory for models with the given zones."""
    def _make(
        zone_names: List[str],
        building_name: str = "Test Building",
        location_name: Optional[str] = None,
    ) -> IDF:
        model = parser.new()
        model.newidfobject('BUILDING', Name=building_name)
        for name in zone_names:
            model.newidfobject('ZONE', Name=name)
        if location_name:
            model.newidfobject('SITE:LOCATION', Name=location_name)
        return model
    return _make


@pytest.fixture
def geometry_dir(tmp_path, make_model, parser) -> Path:
    """Geometry directory holding an ASHRAESmallOffice.idf preset."""
    directory = tmp_path / "geometry"
    directory.mkdir()
    preset = make_model(
        ["Core_ZN", "Perimeter_ZN_1", "Perimeter_ZN_2", "Perimeter_ZN_3", "Perimeter_ZN_4"],
        building_name="ASHRAE Small Office",
    )
    parser.save(preset, directory / "ASHRAESmallOffice.idf")
    return directory


# =============================================================================
# MAPPING FIXTURES
# =============================================================================

@pytest.fixture
def write_mapping(tmp_path):
    """Write a mapping document (dict or raw text) and return its path."""
    def _write(document: Any, name: str = "hvac_zone_mapping.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def example_mapping_path() -> Path:
    return Path(__file__).parent / "fixtures" / "hvac_zone_mapping.json"


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================

class FakeGenerator:
    """Records calls instead of running openstudio-standards."""

    def __init__(self, result: bool = True, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create_typical_building_from_model(
        self, model, template, climate_zone, hvac_system_type, user_hvac_mapping=None
    ) -> bool:
        self.calls.append({
            "model": model,
            "template": template,
            "climate_zone": climate_zone,
            "hvac_system_type": hvac_system_type,
            "user_hvac_mapping": user_hvac_mapping,
        })
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def ddy_file(tmp_path, parser) -> Path:
    """Chicago O'Hare design-day file."""
    ddy = parser.new()
    ddy.newidfobject('SITE:LOCATION', Name='Chicago Ohare Intl Ap_IL_USA Design_Conditions')
    for name in [
        'Chicago Ohare Intl Ap Ann Htg 99.6% Condns DB',
        'Chicago Ohare Intl Ap Ann Hum_n 99.6% Condns DP=>MCDB',
        'Chicago Ohare Intl Ap Ann Clg .4% Condns DB=>MWB',
        'Chicago Ohare Intl Ap Ann Clg .4% Condns WB=>MDB',
    ]:
        ddy.newidfobject('SIZINGPERIOD:DESIGNDAY', Name=name)
    path = tmp_path / "USA_IL_Chicago-OHare.Intl.AP.725300_TMY3.ddy"
    parser.save(ddy, path)
    return path


class FakeDownloader:
    """Returns local weather files instead of downloading."""

    def __init__(self, files: WeatherFiles):
        self.files = files
        self.requested: List[str] = []

    def get_or_download(self, climate_zone: str) -> WeatherFiles:
        self.requested.append(climate_zone)
        return self.files


@pytest.fixture
def fake_downloader(ddy_file) -> FakeDownloader:
    epw = ddy_file.with_suffix('.epw')
    epw.write_text("LOCATION,Chicago Ohare Intl Ap,IL,USA,TMY3,725300,41.98,-87.92,-6.0,201.0\n")
    return FakeDownloader(WeatherFiles(epw=epw, ddy=ddy_file))
