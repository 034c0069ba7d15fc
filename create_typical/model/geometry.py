"""
Prototype geometry presets.
"""

from pathlib import Path
from typing import List, Optional
import logging

from eppy.modeleditor import IDF

from ..constants import EXISTING_GEOMETRY, GEOMETRY_FILES
from ..core.config import settings
from ..core.idf_parser import IDFParser, get_parser

logger = logging.getLogger(__name__)


def list_geometry_presets() -> List[str]:
    """Preset names that replace the model geometry."""
    return [name for name in GEOMETRY_FILES if name != EXISTING_GEOMETRY]


def resolve_geometry_path(name: str, geometry_dir: Optional[Path] = None) -> Path:
    """
    Locate a preset geometry file.

    Raises:
        ValueError: If ``name`` is not a known preset
        FileNotFoundError: If the preset file is missing from the geometry directory
    """
    if name not in list_geometry_presets():
        raise ValueError(f"Unknown geometry preset: {name}")

    geometry_dir = geometry_dir or settings.geometry_dir
    path = Path(geometry_dir) / name
    if not path.is_file():
        raise FileNotFoundError(f"Geometry file not found: {path}")
    return path


def load_geometry_model(
    name: str,
    geometry_dir: Optional[Path] = None,
    parser: Optional[IDFParser] = None,
) -> IDF:
    """
    Load a preset geometry as a new model.

    Args:
        name: One of ``GEOMETRY_FILES`` other than "Existing Geometry"
        geometry_dir: Directory holding the presets (default: settings.geometry_dir)
        parser: IDF parser to use

    Returns:
        Freshly loaded model
    """
    path = resolve_geometry_path(name, geometry_dir)
    parser = parser or get_parser()
    logger.info(f"Loading geometry preset {path}", extra={"geometry_file": name})
    return parser.load(path)
