"""Prediction pipeline: observe, score, alert, advise, store."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from climate_intel.core.alerts import generate_alerts
from climate_intel.core.exceptions import ProviderError
from climate_intel.core.knowledge import KnowledgeBase, knowledge_base
from climate_intel.core.models import Observation, Prediction
from climate_intel.core.scoring import ScoringEngine, ScoringTables
from climate_intel.data_sources.base import ObservationProvider, RecommendationProvider
from climate_intel.data_sources.fixtures import FixtureObservationProvider
from climate_intel.data_sources.open_meteo import OpenMeteoObservationProvider
from climate_intel.data_sources.recommendations import CatalogRecommendationProvider
from climate_intel.localization.catalog import MultilingualCatalog, load_catalog
from climate_intel.storage.store import PersistenceStore, create_store
from climate_intel.utils.config import settings


class PredictionService:
    """Runs the full prediction for a region/event pair."""

    def __init__(
        self,
        provider: ObservationProvider,
        catalog: MultilingualCatalog,
        store: PersistenceStore,
        engine: Optional[ScoringEngine] = None,
        recommender: Optional[RecommendationProvider] = None,
        knowledge: Optional[KnowledgeBase] = None,
        fallback_provider: Optional[ObservationProvider] = None,
        include_humidity: bool = False,
    ):
        self.provider = provider
        self.catalog = catalog
        self.store = store
        self.engine = engine or ScoringEngine()
        self.recommender = recommender or CatalogRecommendationProvider(catalog)
        self.knowledge = knowledge or knowledge_base
        self.fallback_provider = fallback_provider
        self.include_humidity = include_humidity

    def observe(self, region: str, event_type: str) -> tuple:
        """Return (observation, source name), applying the fallback policy on provider errors."""
        try:
            return self.provider.get_observation(region, event_type), self.provider.name
        except ProviderError as e:
            if self.fallback_provider is None:
                raise
            logger.warning(f"Observation fetch failed ({e}); using fallback conditions")
            return self.fallback_provider.get_observation(region, event_type), "fallback"

    def predict(self, region: str, event_type: str, language: str = "en") -> Prediction:
        language = self.catalog.require_language(language)
        observation, source = self.observe(region, event_type)
        return self._build(region, event_type, language, observation, source)

    def score_observation(
        self,
        region: str,
        event_type: str,
        observation: Observation,
        language: str = "en",
    ) -> Prediction:
        language = self.catalog.require_language(language)
        return self._build(region, event_type, language, observation, "request")

    def _build(
        self,
        region: str,
        event_type: str,
        language: str,
        observation: Observation,
        source: str,
    ) -> Prediction:
        start = datetime.now(timezone.utc)
        prediction_id = f"PR-{start.strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:6]}"

        logger.info(f"Prediction {prediction_id}: {event_type} in {region} [{language}]")

        score = self.engine.score(observation, region, event_type, self.include_humidity)
        alerts = generate_alerts(score.severity_score, event_type, region, self.catalog, language)
        recommendations = self.recommender.get_recommendations(score, region, event_type, language)
        ethics = self.recommender.get_ethical_considerations(region, language)
        context = self.knowledge.search(event_type, region, event_type)

        prediction = Prediction(
            prediction_id=prediction_id,
            timestamp=start,
            region=region,
            event_type=event_type,
            language=language,
            observation=observation,
            score=score,
            observation_source=source,
            alerts=alerts,
            recommendations=recommendations,
            ethical_considerations=ethics,
            regional_alert=self.catalog.regional_alert(region, event_type, language),
            context=context,
            metadata={"include_humidity": self.include_humidity},
        )

        self.store.save(prediction)
        logger.info(
            f"Prediction done: severity {score.severity_score:.2f} ({score.alert_level.value}), "
            f"impact {score.economic_impact:.2f}, {len(alerts)} alerts"
        )
        return prediction


def build_default_service() -> PredictionService:
    """Wire a PredictionService from settings."""
    catalog = load_catalog(settings.localization.catalog_path)
    if settings.predictor.observation_source == "fixture":
        provider = FixtureObservationProvider()
    else:
        provider = OpenMeteoObservationProvider()

    return PredictionService(
        provider=provider,
        catalog=catalog,
        store=create_store(settings.storage.backend, settings.storage.path, settings.storage.max_records),
        engine=ScoringEngine(ScoringTables.from_config(settings.scoring)),
        fallback_provider=FixtureObservationProvider() if settings.predictor.fallback_on_provider_error else None,
        include_humidity=settings.predictor.include_humidity,
    )
