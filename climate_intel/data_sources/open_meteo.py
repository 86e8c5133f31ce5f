"""Observation provider backed by the Open-Meteo forecast API (free, no API key)."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import httpx
from loguru import logger

from climate_intel.core.exceptions import ProviderError
from climate_intel.core.models import Observation
from climate_intel.data_sources.base import ObservationProvider
from climate_intel.utils.config import settings
from climate_intel.utils.constants import INDIA_CENTER, REGION_COORDINATES, THUNDERSTORM_CODES

CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "wind_speed_10m",
    "surface_pressure",
    "cloud_cover",
    "precipitation",
    "weather_code",
    "cape",
]

# J/kg of CAPE per storm-activity point; 2500 J/kg saturates the index
CAPE_PER_POINT = 25.0
THUNDERSTORM_FLOOR = 70.0


class OpenMeteoObservationProvider(ObservationProvider):
    """Current conditions for Indian regions via Open-Meteo."""

    name = "open_meteo"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        cache_dir: Optional[Path] = None,
        cache_ttl_minutes: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or settings.open_meteo.base_url
        self.timeout = timeout or settings.open_meteo.timeout_seconds
        self.cache_dir = Path(cache_dir or settings.open_meteo.cache_dir)
        self.cache_ttl = timedelta(
            minutes=cache_ttl_minutes if cache_ttl_minutes is not None else settings.open_meteo.cache_ttl_minutes
        )
        self.transport = transport

    def _cache_path(self, key: str) -> Path:
        return self.cache_dir / f"{key}.json"

    def _read_cache(self, key: str) -> Optional[dict]:
        path = self._cache_path(key)
        if not path.exists() or self.cache_ttl <= timedelta(0):
            return None
        try:
            with open(path) as f:
                data = json.load(f)
            cached_at = datetime.fromisoformat(data["cached_at"])
            if datetime.now(timezone.utc) - cached_at < self.cache_ttl:
                return data["data"]
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Ignoring unreadable cache entry {path.name}: {e}")
        return None

    def _write_cache(self, key: str, data: dict):
        if self.cache_ttl <= timedelta(0):
            return
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        with open(self._cache_path(key), "w") as f:
            json.dump({"cached_at": datetime.now(timezone.utc).isoformat(), "data": data}, f)

    @staticmethod
    def coordinates(region: str) -> tuple:
        return REGION_COORDINATES.get(region, INDIA_CENTER)

    def fetch_current(self, lat: float, lon: float) -> dict:
        """Fetch the raw `current` block for a coordinate."""
        cache_key = f"current_{lat}_{lon}"
        cached = self._read_cache(cache_key)
        if cached:
            return cached

        params = {
            "latitude": lat,
            "longitude": lon,
            "current": ",".join(CURRENT_VARIABLES),
            "wind_speed_unit": "kmh",
            "timezone": settings.open_meteo.timezone,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(self.base_url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            logger.error(f"Open-Meteo fetch failed: {e}")
            raise ProviderError(self.name, str(e)) from e
        except ValueError as e:
            logger.error(f"Open-Meteo returned invalid JSON: {e}")
            raise ProviderError(self.name, "invalid JSON response") from e

        current = data.get("current")
        if not current:
            raise ProviderError(self.name, "response has no current conditions")

        self._write_cache(cache_key, current)
        return current

    def get_observation(self, region: str, event_type: str) -> Observation:
        lat, lon = self.coordinates(region)
        current = self.fetch_current(lat, lon)
        observation = self.to_observation(current)
        logger.info(
            f"Open-Meteo {region}: {observation.temperature:.1f}°C, "
            f"wind {observation.wind_speed:.1f} km/h, storm {observation.storm_activity:.0f}"
        )
        return observation

    @classmethod
    def to_observation(cls, current: dict) -> Observation:
        try:
            interval_s = current.get("interval") or 3600
            precip_rate = (current.get("precipitation") or 0.0) * 3600 / interval_s
            return Observation(
                temperature=float(current["temperature_2m"]),
                humidity=float(current["relative_humidity_2m"]),
                wind_speed=float(current["wind_speed_10m"]),
                pressure=float(current["surface_pressure"]),
                cloud_cover=float(current["cloud_cover"]),
                precipitation_intensity=float(precip_rate),
                storm_activity=cls.storm_activity(current.get("cape"), current.get("weather_code")),
            )
        except (KeyError, TypeError) as e:
            raise ProviderError(cls.name, f"incomplete current conditions: {e}") from e

    @staticmethod
    def storm_activity(cape: Optional[float], weather_code: Optional[int]) -> float:
        """Storm index 0-100 from convective energy, floored during thunderstorms."""
        activity = min((cape or 0.0) / CAPE_PER_POINT, 100.0)
        if weather_code in THUNDERSTORM_CODES:
            activity = max(activity, THUNDERSTORM_FLOOR)
        return float(activity)
