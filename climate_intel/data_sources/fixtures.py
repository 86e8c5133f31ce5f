"""In-memory observation provider for tests and offline use."""

from typing import Mapping, Optional

from loguru import logger

from climate_intel.core.models import Observation
from climate_intel.data_sources.base import ObservationProvider
from climate_intel.utils.constants import FALLBACK_CONDITIONS

FALLBACK_OBSERVATION = Observation(**FALLBACK_CONDITIONS)


class FixtureObservationProvider(ObservationProvider):
    """Serves fixed observations per region, or the canned fallback conditions."""

    name = "fixture"

    def __init__(
        self,
        observations: Optional[Mapping[str, Observation]] = None,
        default: Observation = FALLBACK_OBSERVATION,
    ):
        self.observations = dict(observations or {})
        self.default = default

    def get_observation(self, region: str, event_type: str) -> Observation:
        observation = self.observations.get(region)
        if observation is None:
            logger.debug(f"No fixture for {region}, serving default conditions")
            return self.default
        return observation
