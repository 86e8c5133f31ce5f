"""Catalog-backed recommendation provider."""

from climate_intel.core.models import AlertLevel, Recommendation, ScoreResult
from climate_intel.data_sources.base import RecommendationProvider
from climate_intel.localization.catalog import MultilingualCatalog

ETHICAL_ASPECTS = [
    ("vulnerablePopulations", "vulnerable_populations"),
    ("resourceAllocation", "resource_allocation"),
    ("communitySupport", "community_support"),
]

RISK_PHRASES = {
    AlertLevel.CRITICAL: "High Risk",
    AlertLevel.WARNING: "Medium Risk",
    AlertLevel.WATCH: "Low Risk",
    AlertLevel.NONE: "Low Risk",
}


class CatalogRecommendationProvider(RecommendationProvider):
    """Builds immediate and preparedness guidance from the multilingual catalog."""

    def __init__(self, catalog: MultilingualCatalog):
        self.catalog = catalog

    def get_recommendations(
        self,
        score: ScoreResult,
        region: str,
        event_type: str,
        language: str = "en",
    ) -> list:
        c = self.catalog
        immediate = c.localized_recommendations(event_type, language)[:3]
        if not immediate:
            immediate = (c.translate("stayIndoors", language),)

        return [
            Recommendation(
                priority=c.translate_text(RISK_PHRASES[score.alert_level], language),
                category=c.translate("immediateActions", language),
                actions=tuple(immediate),
                timeline="0-6 hours",
                regional_context=c.regional_alert(region, event_type, language),
            ),
            Recommendation(
                priority=c.translate_text("Medium Risk", language),
                category=c.translate("preparedness", language),
                actions=(
                    c.translate("emergencySupplies", language),
                    c.translate("stayIndoors", language),
                ),
                timeline="6-24 hours",
            ),
        ]

    def get_ethical_considerations(self, region: str, language: str = "en") -> list:
        return [
            {
                "aspect": self.catalog.translate(aspect, language),
                "consideration": self.catalog.ethical_guidance(kind, language),
            }
            for aspect, kind in ETHICAL_ASPECTS
        ]
