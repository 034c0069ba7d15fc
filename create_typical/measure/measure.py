"""
Create Typical Building measure.

Generates a standard building model from the current model (or a prototype
geometry) for a chosen building energy code, climate zone and HVAC system.

Usage:
    from create_typical.measure import CreateTypicalBuilding, MeasureRunner

    runner = MeasureRunner()
    ok = CreateTypicalBuilding().run(model, runner, {
        "geometry_file": "ASHRAESmallOffice.idf",
        "climate_zone": "ASHRAE 169-2013-5A",
        "template": "90.1-2013",
        "hvac_type": "JSON specified",
        "user_hvac_json_path": "/path/to/hvac_zone_mapping.json",
    })
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from eppy.modeleditor import IDF
from pydantic import ValidationError

from ..constants import EXISTING_GEOMETRY, JSON_SPECIFIED, LOOKUP_FROM_MODEL
from ..core.idf_parser import IDFParser, get_parser
from ..hvac.zone_mapping import MappingErrorKind, ZoneMappingError, validate_zone_mapping
from ..model.climate import lookup_climate_zone
from ..model.geometry import load_geometry_model
from ..model.overwrite import overwrite_existing_model
from ..model.weather import add_design_days_and_weather_file
from ..standards.generator import ModelGenerator, OpenStudioStandardsGenerator
from ..utils.weather_downloader import WeatherDownloader
from .arguments import ArgumentDefinition, MeasureArguments, argument_definitions
from .runner import MeasureRunner

logger = logging.getLogger(__name__)

CLIMATE_ZONE_LOOKUP_ERROR = (
    "Error when looking up climate zone from model. Ensure the model has a weather file "
    "with climate statistics or a Site:Location at a known station.\n"
    "**NOTE**: Geometry files typically do not have this information"
)


def process_hvac_to_zone_mapping(
    model: IDF,
    user_hvac_json_path: Union[str, Path, None],
    runner: MeasureRunner,
    parser: Optional[IDFParser] = None,
) -> Dict[str, Any]:
    """
    Check a user's system-to-zone mapping against the model.

    Returns:
        The mapping if it is valid, else an empty dict (the error is registered on the runner)
    """
    parser = parser or get_parser()
    zone_names = parser.get_zone_names(model)

    runner.register_info(f"Reading in HVAC mapping information from {user_hvac_json_path}.")
    try:
        mapping = validate_zone_mapping(user_hvac_json_path or "", zone_names)
    except ZoneMappingError as e:
        if e.kind is MappingErrorKind.UNKNOWN_ZONES:
            building = parser.get_building_name(model) or "unnamed building"
            runner.register_error(
                f"Error in the {e.path}. The following zones don't exist in building "
                f"'{building}': {', '.join(e.zones)}. NOTE, zone names are case sensitive."
            )
        else:
            runner.register_error(str(e))
        return {}

    runner.register_info(f"No issues found in: {user_hvac_json_path}.")
    return mapping


class CreateTypicalBuilding:
    """The measure: argument definitions plus the run sequence."""

    def __init__(
        self,
        generator: Optional[ModelGenerator] = None,
        downloader: Optional[WeatherDownloader] = None,
        parser: Optional[IDFParser] = None,
        geometry_dir: Optional[Path] = None,
    ):
        """
        Args:
            generator: Typical-building generator (default: OpenStudio CLI, created on first use)
            downloader: Weather downloader (default: cached downloader from settings)
            parser: IDF parser
            geometry_dir: Directory of the geometry presets (default: settings.geometry_dir)
        """
        self._generator = generator
        self._downloader = downloader
        self.parser = parser or get_parser()
        self.geometry_dir = geometry_dir

    def name(self) -> str:
        return 'Create Typical Building'

    def description(self) -> str:
        return (
            'Generates EnergyPlus models of typical buildings from a few select choices: '
            'the building energy code year (e.g., ASHRAE 90.1-2013), the climate zone, and '
            'the heating, ventilation, and air conditioning (HVAC) system.'
        )

    def modeler_description(self) -> str:
        return (
            'Generates a standard building model from either the current geometry or a '
            'prototype geometry file, applying the selected building energy standard, HVAC '
            'system and climate zone. Choosing any geometry other than "Existing Geometry" '
            'replaces the current model. Selecting "JSON specified" as "HVAC Type" maps '
            'HVAC systems to specific zones of the model; see '
            'README.md for an example mapping.'
        )

    def arguments(self) -> List[ArgumentDefinition]:
        return argument_definitions()

    @property
    def generator(self) -> ModelGenerator:
        if self._generator is None:
            self._generator = OpenStudioStandardsGenerator(parser=self.parser)
        return self._generator

    def run(
        self,
        model: IDF,
        runner: MeasureRunner,
        user_arguments: Union[MeasureArguments, Dict[str, Any], None] = None,
    ) -> bool:
        """
        Run the measure on ``model`` (mutated in place).

        Returns:
            True on success; on failure the reason is registered on ``runner``
        """
        runner.register_info("Starting create typical")

        args = self._parse_arguments(user_arguments, runner)
        if args is None:
            return False

        # NOTE: a geometry preset replaces the whole content of the model
        if args.geometry_file != EXISTING_GEOMETRY:
            try:
                new_model = load_geometry_model(args.geometry_file, self.geometry_dir, self.parser)
            except (FileNotFoundError, ValueError) as e:
                runner.register_error(str(e))
                return False
            overwrite_existing_model(model, new_model)
            runner.register_info(f"Model geometry overwritten with {args.geometry_file}.")

        runner.register_info("Model loaded, attempting Create Typical Building from model with parameters:")
        runner.register_info(f"Geometry Selection: {args.geometry_file}")
        runner.register_info(f"Building Code: {args.template}")
        runner.register_info(f"Climate Zone: {args.climate_zone}")
        runner.register_info(f"HVAC System Type: {args.hvac_type}")

        hvac_mapping = None
        if args.hvac_type == JSON_SPECIFIED:
            hvac_mapping = process_hvac_to_zone_mapping(
                model, args.user_hvac_json_path, runner, self.parser
            )
            if not hvac_mapping:
                return False

        runner.register_info("Begin typical model generation...")

        climate_zone = args.climate_zone
        if climate_zone == LOOKUP_FROM_MODEL:
            climate_zone = lookup_climate_zone(model, self.parser)
            if not climate_zone:
                runner.register_error(CLIMATE_ZONE_LOOKUP_ERROR)
                return False
            runner.register_info(f"Climate zone found in model: {climate_zone}")

        try:
            generated = self.generator.create_typical_building_from_model(
                model,
                args.template,
                climate_zone=climate_zone,
                hvac_system_type=args.hvac_type,
                user_hvac_mapping=hvac_mapping,
            )
        except RuntimeError as e:
            stderr = getattr(e, 'stderr', '')
            runner.register_error(f"Typical building generation failed: {e}")
            if stderr:
                logger.debug(stderr)
            return False

        if not generated:
            runner.register_error("Typical building generation failed.")
            return False

        if self.parser.get_weather_file(model) is None:
            runner.register_info(
                f"No weather file assigned to this model. Assigning default for climate zone: '{climate_zone}'"
            )
            try:
                location_name = add_design_days_and_weather_file(
                    model, climate_zone, self._downloader, self.parser
                )
            except (RuntimeError, OSError, ValueError) as e:
                runner.register_error(str(e))
                return False
            runner.register_info(
                f"Weather file and design days for {climate_zone} assigned to '{location_name}'"
            )

        runner.register_final_condition("Typical building generation complete.")
        return True

    def _parse_arguments(
        self,
        user_arguments: Union[MeasureArguments, Dict[str, Any], None],
        runner: MeasureRunner,
    ) -> Optional[MeasureArguments]:
        if isinstance(user_arguments, MeasureArguments):
            return user_arguments
        try:
            return MeasureArguments(**(user_arguments or {}))
        except ValidationError as e:
            for error in e.errors():
                field = '.'.join(str(part) for part in error['loc'])
                runner.register_error(f"Invalid argument {field}: {error['msg']}")
            return None
