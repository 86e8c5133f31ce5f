"""
Pytest fixtures for scoring, localization and API tests
"""

import os

os.environ.setdefault("APP_ENV", "test")

import pytest

from climate_intel.core.models import Observation
from climate_intel.core.predictor import PredictionService
from climate_intel.core.scoring import ScoringEngine, ScoringTables
from climate_intel.data_sources.fixtures import FixtureObservationProvider
from climate_intel.localization.catalog import load_catalog
from climate_intel.storage.store import InMemoryStore


def make_observation(**overrides) -> Observation:
    """Observation at the midpoint of every documented range."""
    values = {
        "temperature": 25.0,
        "humidity": 50.0,
        "wind_speed": 50.0,
        "pressure": 1000.0,
        "cloud_cover": 50.0,
        "precipitation_intensity": 25.0,
        "storm_activity": 50.0,
    }
    values.update(overrides)
    return Observation(**values)


ZERO_OBSERVATION = make_observation(
    temperature=0.0,
    humidity=0.0,
    wind_speed=0.0,
    pressure=0.0,
    cloud_cover=0.0,
    precipitation_intensity=0.0,
    storm_activity=0.0,
)

SEVERE_OBSERVATION = make_observation(
    temperature=45.0,
    humidity=95.0,
    wind_speed=120.0,
    pressure=960.0,
    cloud_cover=100.0,
    precipitation_intensity=60.0,
    storm_activity=95.0,
)

CALM_OBSERVATION = make_observation(
    temperature=35.0,
    humidity=70.0,
    wind_speed=15.0,
    pressure=1005.0,
    cloud_cover=0.0,
    precipitation_intensity=0.0,
    storm_activity=0.0,
)


@pytest.fixture
def midpoint_observation():
    return make_observation()


@pytest.fixture
def engine():
    return ScoringEngine(ScoringTables())


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def fixture_provider():
    return FixtureObservationProvider({
        "Chennai, Tamil Nadu": SEVERE_OBSERVATION,
        "Kochi, Kerala": CALM_OBSERVATION,
    })


@pytest.fixture
def service(fixture_provider, catalog, store, engine):
    return PredictionService(
        provider=fixture_provider,
        catalog=catalog,
        store=store,
        engine=engine,
    )
