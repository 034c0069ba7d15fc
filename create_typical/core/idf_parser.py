"""
Structured IDF access using eppy.

The building model handled by the measure is an eppy ``IDF``. This module
owns IDD discovery and the small set of read helpers the measure needs
(zone names, building name, site location, object enumeration).
"""

from pathlib import Path
from typing import Optional, List, Any, Iterator
import shutil
import tempfile
import logging

from eppy.modeleditor import IDF

from .config import settings

logger = logging.getLogger(__name__)


class IDFParser:
    """
    Load, save and query EnergyPlus IDF models.

    Usage:
        parser = IDFParser()
        model = parser.load(Path("model.idf"))

        zones = parser.get_zone_names(model)
        parser.save(model, Path("typical.idf"))
    """

    @classmethod
    def _ensure_idd(cls) -> None:
        """Ensure the IDD is set (only needed once per process)."""
        if IDF.getiddname() is not None:
            return

        possible_paths = []
        if settings.energyplus_idd_path is not None:
            possible_paths.append(str(settings.energyplus_idd_path))

        ep_path = shutil.which("energyplus")
        if ep_path:
            possible_paths.append(str(Path(ep_path).resolve().parent / "Energy+.idd"))

        possible_paths.extend([
            "/usr/local/openstudio/EnergyPlus/Energy+.idd",
            "/usr/local/EnergyPlus-24-2-0/Energy+.idd",
            "/Applications/EnergyPlus-24-2-0/Energy+.idd",
            "C:\\EnergyPlusV24-2-0\\Energy+.idd",
        ])

        for path in possible_paths:
            if Path(path).exists():
                IDF.setiddname(path)
                logger.debug(f"Using IDD from: {path}")
                return

        raise RuntimeError(
            "EnergyPlus IDD not found. Set CREATE_TYPICAL_ENERGYPLUS_IDD_PATH "
            "or install EnergyPlus."
        )

    def new(self) -> IDF:
        """Create an empty model."""
        self._ensure_idd()
        return self.load_string("")

    def load(self, idf_path: Path) -> IDF:
        """
        Load an IDF file.

        Args:
            idf_path: Path to IDF file

        Returns:
            Loaded IDF object

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not Path(idf_path).is_file():
            raise FileNotFoundError(f"IDF file not found: {idf_path}")
        self._ensure_idd()
        return IDF(str(idf_path))

    def load_string(self, idf_content: str) -> IDF:
        """
        Load IDF from string content.

        Args:
            idf_content: IDF file content as string

        Returns:
            Loaded IDF object
        """
        self._ensure_idd()
        # eppy wants a file path, so round-trip through a temp file
        with tempfile.NamedTemporaryFile(mode='w', suffix='.idf', delete=False) as f:
            f.write(idf_content)
            temp_path = f.name

        try:
            return IDF(temp_path)
        finally:
            Path(temp_path).unlink(missing_ok=True)

    def save(self, idf: IDF, output_path: Path) -> None:
        """Save IDF to file."""
        idf.saveas(str(output_path))

    # ========== Queries ==========

    def iter_objects(self, idf: IDF) -> Iterator[Any]:
        """Yield every object in the model."""
        for objects in idf.idfobjects.values():
            yield from objects

    def count_objects(self, idf: IDF) -> int:
        """Total number of objects in the model."""
        return sum(1 for _ in self.iter_objects(idf))

    def get_building_name(self, idf: IDF) -> Optional[str]:
        """Get the building name."""
        buildings = idf.idfobjects['BUILDING']
        if buildings:
            return getattr(buildings[0], 'Name', None)
        return None

    def get_zone_names(self, idf: IDF) -> List[str]:
        """Get all thermal zone names, in model order."""
        return [getattr(z, 'Name', '') for z in idf.idfobjects['ZONE']]

    def get_zone_count(self, idf: IDF) -> int:
        """Get the number of zones."""
        return len(idf.idfobjects['ZONE'])

    def get_site_location_name(self, idf: IDF) -> Optional[str]:
        """Name of the first Site:Location object, if any."""
        locations = idf.idfobjects['SITE:LOCATION']
        if locations:
            return getattr(locations[0], 'Name', None)
        return None

    def get_weather_file(self, idf: IDF) -> Optional[Path]:
        """Weather file assigned to the model, or None."""
        if getattr(idf, 'epw', None):
            return Path(idf.epw)
        return None


# Module-level convenience instance
_parser = None


def get_parser() -> IDFParser:
    """Get the module-level parser instance."""
    global _parser
    if _parser is None:
        _parser = IDFParser()
    return _parser
