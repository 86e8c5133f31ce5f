"""Data sources module."""

from climate_intel.data_sources.base import ObservationProvider, RecommendationProvider
from climate_intel.data_sources.fixtures import FALLBACK_OBSERVATION, FixtureObservationProvider
from climate_intel.data_sources.open_meteo import OpenMeteoObservationProvider
from climate_intel.data_sources.recommendations import CatalogRecommendationProvider

__all__ = [
    "ObservationProvider",
    "RecommendationProvider",
    "FixtureObservationProvider",
    "FALLBACK_OBSERVATION",
    "OpenMeteoObservationProvider",
    "CatalogRecommendationProvider",
]
