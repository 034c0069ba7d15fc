"""
Weather file downloader for ASHRAE climate zones.

Downloads the EnergyPlus weather (.epw), design-day (.ddy) and statistics
(.stat) files of each climate zone's representative TMY3 station.
"""

import urllib.error
import urllib.request
import zipfile
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, List
import logging

from ..core.config import settings
from ..model.climate import (
    CLIMATE_ZONE_STATIONS,
    WeatherStation,
    station_for_climate_zone,
)

logger = logging.getLogger(__name__)

# Primary: climate.onebuilding.org (zip with epw/ddy/stat)
# Fallback: EnergyPlus GitHub (individual files, a handful of stations)
ONEBUILDING_URL = (
    "https://climate.onebuilding.org/WMO_Region_4_North_and_Central_America/"
    "USA_United_States_of_America/"
)
GITHUB_WEATHER_URL = "https://raw.githubusercontent.com/NREL/EnergyPlus/develop/weather/"

WEATHER_SUFFIXES = ('.epw', '.ddy', '.stat')


@dataclass
class WeatherFiles:
    """Local weather files of one station."""
    epw: Path
    ddy: Path
    stat: Optional[Path] = None


class WeatherDownloader:
    """Download and cache EnergyPlus weather files per climate zone."""

    def __init__(self, cache_dir: Optional[Path] = None):
        """
        Initialize weather downloader.

        Args:
            cache_dir: Directory to cache downloaded files. Defaults to settings.weather_cache_dir
        """
        self.cache_dir = Path(cache_dir or settings.weather_cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def list_available(self) -> List[str]:
        """Climate zones with a representative station."""
        return sorted(CLIMATE_ZONE_STATIONS.keys())

    def _cache_path(self, station: WeatherStation, suffix: str) -> Path:
        # Station names contain dots, so Path.with_suffix would cut them short
        return self.cache_dir / f"{station.filename_base}{suffix}"

    def cached_files(self, station: WeatherStation) -> WeatherFiles:
        """Cache locations for a station's files."""
        stat = self._cache_path(station, '.stat')
        return WeatherFiles(
            epw=self._cache_path(station, '.epw'),
            ddy=self._cache_path(station, '.ddy'),
            stat=stat if stat.exists() else None,
        )

    def download(self, climate_zone: str, force: bool = False) -> WeatherFiles:
        """
        Download weather files for a climate zone.

        Args:
            climate_zone: "ASHRAE 169-2013-5A" or "5A"
            force: Force re-download even if cached

        Returns:
            WeatherFiles with local paths

        Raises:
            ValueError: If climate zone not recognized
            RuntimeError: If download fails
        """
        station = station_for_climate_zone(climate_zone)
        files = self.cached_files(station)

        if files.epw.exists() and files.ddy.exists() and not force:
            logger.info(f"Using cached weather files: {files.epw}")
            return files

        logger.info(f"Downloading weather files for {station.filename_base}...")

        last_error = None
        try:
            self._download_zip(self._onebuilding_url(station), station)
            return self.cached_files(station)
        except RuntimeError as e:
            logger.debug(f"Failed: onebuilding archive - {e}")
            last_error = e

        try:
            for suffix in WEATHER_SUFFIXES:
                url = f"{GITHUB_WEATHER_URL}{station.filename_base}{suffix}"
                target = self._cache_path(station, suffix)
                try:
                    target.write_bytes(self._fetch(url))
                except RuntimeError:
                    if suffix == '.stat':
                        continue  # optional
                    raise
            return self.cached_files(station)
        except RuntimeError as e:
            logger.debug(f"Failed: GitHub weather files - {e}")
            last_error = e

        raise RuntimeError(
            f"Failed to download weather files for {climate_zone} ({last_error}). "
            f"Download {station.filename_base} manually from {ONEBUILDING_URL} "
            f"and save it to {self.cache_dir}"
        )

    def _onebuilding_url(self, station: WeatherStation) -> str:
        return f"{ONEBUILDING_URL}{station.state_dir}/{station.filename_base}.zip"

    def _fetch(self, url: str) -> bytes:
        logger.debug(f"Trying: {url}")
        try:
            with urllib.request.urlopen(url, timeout=60) as response:
                return response.read()
        except urllib.error.URLError as e:
            raise RuntimeError(f"Download failed: {e}")

    def _download_zip(self, url: str, station: WeatherStation) -> None:
        """Download a station archive and extract its epw/ddy/stat files."""
        data = self._fetch(url)
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as zf:
                names = zf.namelist()
                for suffix in WEATHER_SUFFIXES:
                    matches = [n for n in names if n.lower().endswith(suffix)]
                    if not matches:
                        if suffix == '.stat':
                            continue
                        raise RuntimeError(f"No {suffix} file found in archive")
                    target = self._cache_path(station, suffix)
                    target.write_bytes(zf.read(matches[0]))
        except zipfile.BadZipFile as e:
            raise RuntimeError(f"Invalid archive: {e}")

        logger.info(f"Weather files saved to {self.cache_dir}")

    def get_or_download(self, climate_zone: str) -> WeatherFiles:
        """Get weather files from cache or download if not present."""
        return self.download(climate_zone, force=False)
