"""
Typical-building generation through the OpenStudio standards library.

All substantive generation (constructions, loads, schedules, HVAC systems)
happens in openstudio-standards. This module only hands the model over and
takes the generated model back.

Usage:
    generator = OpenStudioStandardsGenerator()
    generator.create_typical_building_from_model(
        model, '90.1-2013',
        climate_zone='ASHRAE 169-2013-5A',
        hvac_system_type='Inferred',
    )
"""

from pathlib import Path
from typing import Any, Dict, Optional, Protocol
import json
import os
import shutil
import subprocess
import tempfile
import logging

from eppy.modeleditor import IDF

from ..core.config import settings
from ..core.idf_parser import IDFParser, get_parser
from ..model.overwrite import overwrite_existing_model

logger = logging.getLogger(__name__)

DRIVER_SCRIPT = Path(__file__).parent / 'create_typical.rb'


class GeneratorError(RuntimeError):
    """Raised when the standards library fails to generate the model."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class ModelGenerator(Protocol):
    """Anything able to turn a model into a typical building in place."""

    def create_typical_building_from_model(
        self,
        model: IDF,
        template: str,
        climate_zone: str,
        hvac_system_type: str,
        user_hvac_mapping: Optional[Dict[str, Any]] = None,
    ) -> bool:
        ...


class OpenStudioStandardsGenerator:
    """
    Run openstudio-standards' CreateTypical through the OpenStudio CLI.

    The model is written to a temporary IDF, generated by the CLI, and the
    result is written back into the same model object.
    """

    def __init__(
        self,
        openstudio_path: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        parser: Optional[IDFParser] = None,
    ):
        """
        Initialize generator.

        Args:
            openstudio_path: Path to the openstudio executable
            timeout_seconds: Maximum runtime of one generation
            parser: IDF parser used to write and reload the model
        """
        self.openstudio_path = openstudio_path or settings.openstudio_path or self._find_openstudio()
        self.timeout_seconds = timeout_seconds or settings.generator_timeout_seconds
        self.parser = parser or get_parser()

    def create_typical_building_from_model(
        self,
        model: IDF,
        template: str,
        climate_zone: str,
        hvac_system_type: str,
        user_hvac_mapping: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Generate a typical building from ``model`` (mutated in place).

        Raises:
            GeneratorError: If the CLI fails or times out
        """
        with tempfile.TemporaryDirectory(prefix='create_typical_') as tmp:
            work_dir = Path(tmp)
            idf_in = work_dir / 'in.idf'
            idf_out = work_dir / 'out.idf'
            model.savecopy(str(idf_in))

            request = {
                'idf_in': str(idf_in),
                'idf_out': str(idf_out),
                'template': template,
                'climate_zone': climate_zone,
                'hvac_type': hvac_system_type,
                'mapping_path': None,
            }
            if user_hvac_mapping:
                mapping_path = work_dir / 'hvac_mapping.json'
                mapping_path.write_text(json.dumps(user_hvac_mapping), encoding='utf-8')
                request['mapping_path'] = str(mapping_path)

            request_path = work_dir / 'request.json'
            request_path.write_text(json.dumps(request), encoding='utf-8')

            cmd = [self.openstudio_path, 'execute_ruby_script', str(DRIVER_SCRIPT)]
            env = dict(os.environ, CREATE_TYPICAL_REQUEST=str(request_path))

            logger.info(
                "Running openstudio-standards CreateTypical",
                extra={"template": template, "climate_zone": climate_zone, "hvac_type": hvac_system_type},
            )
            try:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout_seconds,
                    cwd=work_dir,
                    env=env,
                )
            except subprocess.TimeoutExpired:
                raise GeneratorError(f"Typical building generation timed out after {self.timeout_seconds}s")

            if result.returncode != 0 or not idf_out.exists():
                raise GeneratorError(
                    f"OpenStudio CLI failed with exit code {result.returncode}",
                    stderr=result.stderr,
                )

            generated = self.parser.load(idf_out)

        overwrite_existing_model(model, generated)
        return True

    def _find_openstudio(self) -> str:
        """Auto-detect the OpenStudio CLI."""
        candidates = [
            shutil.which('openstudio'),
            '/usr/local/openstudio/bin/openstudio',
            '/usr/local/bin/openstudio',
        ]
        for path in candidates:
            if path and Path(path).exists():
                return path
        raise RuntimeError(
            "OpenStudio CLI not found. Install OpenStudio or set CREATE_TYPICAL_OPENSTUDIO_PATH."
        )
