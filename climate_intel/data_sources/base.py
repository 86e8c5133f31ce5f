"""Interfaces for the scoring engine's collaborators."""

from abc import ABC, abstractmethod

from climate_intel.core.models import Observation, ScoreResult


class ObservationProvider(ABC):
    """Supplies observations for a region/event pair.

    Implementations may be network-bound; they must return a complete
    Observation or raise ProviderError, never a partial or random one.
    """

    name = "provider"

    @abstractmethod
    def get_observation(self, region: str, event_type: str) -> Observation:
        ...


class RecommendationProvider(ABC):
    """Turns a score into human-readable guidance, optionally localized."""

    @abstractmethod
    def get_recommendations(
        self,
        score: ScoreResult,
        region: str,
        event_type: str,
        language: str = "en",
    ) -> list:
        ...

    def get_ethical_considerations(self, region: str, language: str = "en") -> list:
        return []
