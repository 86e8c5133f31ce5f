"""
Observation providers: Open-Meteo over a mocked transport, fixtures, recommendations
"""

import httpx
import pytest

from climate_intel.core.exceptions import ProviderError
from climate_intel.core.models import AlertLevel
from climate_intel.data_sources.fixtures import FALLBACK_OBSERVATION, FixtureObservationProvider
from climate_intel.data_sources.open_meteo import OpenMeteoObservationProvider
from climate_intel.data_sources.recommendations import CatalogRecommendationProvider

from conftest import CALM_OBSERVATION, SEVERE_OBSERVATION

CURRENT = {
    "time": "2024-11-30T14:00",
    "interval": 900,
    "temperature_2m": 29.4,
    "relative_humidity_2m": 88,
    "wind_speed_10m": 42.5,
    "surface_pressure": 998.2,
    "cloud_cover": 100,
    "precipitation": 3.0,
    "weather_code": 63,
    "cape": 500.0,
}


def make_provider(handler, tmp_path, ttl=0):
    return OpenMeteoObservationProvider(
        base_url="https://api.open-meteo.test/v1/forecast",
        cache_dir=tmp_path,
        cache_ttl_minutes=ttl,
        transport=httpx.MockTransport(handler),
    )


class TestOpenMeteo:

    def test_converts_current_conditions(self, tmp_path):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={"current": CURRENT})

        obs = make_provider(handler, tmp_path).get_observation("Chennai, Tamil Nadu", "Cyclone")

        assert seen["latitude"] == "13.0827"
        assert seen["longitude"] == "80.2707"
        assert "cape" in seen["current"]
        assert obs.temperature == 29.4
        assert obs.humidity == 88.0
        assert obs.wind_speed == 42.5
        assert obs.pressure == 998.2
        assert obs.cloud_cover == 100.0
        # 3 mm in a 15 minute interval
        assert obs.precipitation_intensity == pytest.approx(12.0)
        assert obs.storm_activity == pytest.approx(20.0)

    def test_unknown_region_uses_india_center(self, tmp_path):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={"current": CURRENT})

        make_provider(handler, tmp_path).get_observation("Nagpur, Maharashtra", "Heatwave")
        assert seen["latitude"] == "20.5937"

    @pytest.mark.parametrize("cape,code,expected", [
        (0.0, 0, 0.0),
        (1250.0, 0, 50.0),
        (10000.0, 0, 100.0),
        (0.0, 95, 70.0),
        (2250.0, 99, 90.0),
        (None, None, 0.0),
    ])
    def test_storm_activity(self, cape, code, expected):
        assert OpenMeteoObservationProvider.storm_activity(cape, code) == pytest.approx(expected)

    def test_http_error_raises_provider_error(self, tmp_path):
        provider = make_provider(lambda request: httpx.Response(503), tmp_path)
        with pytest.raises(ProviderError):
            provider.get_observation("Mumbai, Maharashtra", "Flood")

    def test_network_error_raises_provider_error(self, tmp_path):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(ProviderError):
            make_provider(handler, tmp_path).get_observation("Mumbai, Maharashtra", "Flood")

    def test_incomplete_payload_raises_provider_error(self, tmp_path):
        partial = {k: v for k, v in CURRENT.items() if k != "temperature_2m"}
        provider = make_provider(lambda request: httpx.Response(200, json={"current": partial}), tmp_path)
        with pytest.raises(ProviderError):
            provider.get_observation("Mumbai, Maharashtra", "Flood")

    def test_missing_current_block_raises_provider_error(self, tmp_path):
        provider = make_provider(lambda request: httpx.Response(200, json={}), tmp_path)
        with pytest.raises(ProviderError):
            provider.get_observation("Mumbai, Maharashtra", "Flood")

    def test_responses_are_cached(self, tmp_path):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"current": CURRENT})

        provider = make_provider(handler, tmp_path, ttl=30)
        first = provider.get_observation("Kochi, Kerala", "Flood")
        second = provider.get_observation("Kochi, Kerala", "Flood")

        assert first == second
        assert len(calls) == 1
        assert list(tmp_path.glob("current_*.json"))


class TestFixtureProvider:

    def test_serves_configured_region(self):
        provider = FixtureObservationProvider({"Kochi, Kerala": CALM_OBSERVATION})
        assert provider.get_observation("Kochi, Kerala", "Flood") == CALM_OBSERVATION

    def test_serves_fallback_conditions(self):
        obs = FixtureObservationProvider().get_observation("Kochi, Kerala", "Flood")
        assert obs == FALLBACK_OBSERVATION
        assert obs.temperature == 32.0
        assert obs.precipitation_intensity == 20.0
        assert obs.storm_activity == 30.0


class TestRecommendations:

    def test_immediate_and_preparedness(self, catalog, engine):
        score = engine.score(CALM_OBSERVATION, "Chennai, Tamil Nadu", "Cyclone")
        recs = CatalogRecommendationProvider(catalog).get_recommendations(
            score, "Chennai, Tamil Nadu", "Cyclone", "hi"
        )

        assert [r.timeline for r in recs] == ["0-6 hours", "6-24 hours"]
        assert recs[0].category == "तत्काल कार्रवाई"
        assert len(recs[0].actions) == 3
        assert recs[0].regional_context == "Cyclone warning in Chennai. Evacuate coastal areas immediately."
        assert recs[1].actions == ("आपातकालीन सामान तैयार करें", "घर के अंदर रहें और सुरक्षित रहें")

    def test_priority_tracks_alert_level(self, catalog, engine):
        score = engine.score(SEVERE_OBSERVATION, "Kochi, Kerala", "Drought")
        assert score.alert_level == AlertLevel.CRITICAL
        recs = CatalogRecommendationProvider(catalog).get_recommendations(score, "Kochi, Kerala", "Drought", "en")
        assert recs[0].priority == "High Risk"
        assert recs[0].actions == ("Stay indoors and safe",)

    def test_ethical_considerations(self, catalog):
        items = CatalogRecommendationProvider(catalog).get_ethical_considerations("Kochi, Kerala", "ml")
        assert len(items) == 3
        assert items[0]["aspect"] == "Vulnerable Populations"
        assert items[2]["consideration"].startswith("കമ്മ്യൂണിറ്റി")
