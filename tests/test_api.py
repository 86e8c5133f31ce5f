"""
HTTP API tests against the FastAPI app with a fixture-backed service
"""

import pytest
from fastapi.testclient import TestClient

import climate_intel.api.main as api

SEVERE_PAYLOAD = {
    "temperature": 45,
    "humidity": 95,
    "windSpeed": 120,
    "pressure": 960,
    "cloudCover": 100,
    "precipitationIntensity": 60,
    "stormActivity": 95,
}

ZERO_PAYLOAD = {key: 0 for key in SEVERE_PAYLOAD}


@pytest.fixture
def client(monkeypatch, service):
    monkeypatch.setattr(api, "service", service)
    return TestClient(api.app)


class TestScoreEndpoint:

    def test_scores_supplied_observation(self, client):
        response = client.post("/api/v1/score", json={
            "region": "Mumbai, Maharashtra",
            "eventType": "Cyclone",
            "observation": SEVERE_PAYLOAD,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["severityScore"] == 10.0
        assert data["economicImpact"] == 15.0
        assert data["alertLevel"] == "Critical"
        assert [f["name"] for f in data["riskFactors"]] == [
            "Wind Speed", "Storm Activity", "Precipitation", "Temperature",
        ]

    def test_unknown_region_and_event(self, client):
        response = client.post("/api/v1/score", json={
            "region": "Nowhere",
            "eventType": "Meteor",
            "observation": ZERO_PAYLOAD,
        })
        data = response.json()
        assert data["severityScore"] == 1.0
        assert data["economicImpact"] == 0.30
        assert data["alertLevel"] == "None"

    def test_humidity_factor_on_request(self, client):
        response = client.post("/api/v1/score", json={
            "region": "Kochi, Kerala",
            "eventType": "Flood",
            "observation": SEVERE_PAYLOAD,
            "includeHumidity": True,
        })
        assert response.json()["riskFactors"][-1]["name"] == "Humidity"

    def test_invalid_observation_reports_fields(self, client):
        payload = dict(SEVERE_PAYLOAD, humidity="wet")
        del payload["stormActivity"]
        response = client.post("/api/v1/score", json={
            "region": "Kochi, Kerala",
            "eventType": "Flood",
            "observation": payload,
        })
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "InvalidObservation"
        assert set(body["fields"]) == {"humidity", "stormActivity"}

    def test_integer_overflowing_float_is_rejected(self, client):
        # 400-digit integer: valid JSON, overflows a float
        body = (
            '{"region": "Kochi, Kerala", "eventType": "Flood", "observation": '
            '{"temperature": 1' + "0" * 400 + ', "humidity": 70, "windSpeed": 15, "pressure": 1005, '
            '"cloudCover": 0, "precipitationIntensity": 0, "stormActivity": 0}}'
        )
        response = client.post(
            "/api/v1/score", content=body, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 422
        assert response.json()["fields"] == {"temperature": "must be finite"}

    def test_score_does_not_store(self, client, store):
        client.post("/api/v1/score", json={
            "region": "Kochi, Kerala",
            "eventType": "Flood",
            "observation": SEVERE_PAYLOAD,
        })
        assert store.recent() == []


class TestPredictEndpoint:

    def test_predict_by_region(self, client):
        response = client.post("/api/v1/predict", json={
            "region": "Chennai, Tamil Nadu",
            "eventType": "Cyclone",
            "language": "hi",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["alertLevel"] == "Critical"
        assert data["observationSource"] == "fixture"
        assert data["language"] == "hi"
        assert len(data["alerts"]) == 1
        assert data["predictionId"].startswith("PR-")

    def test_predict_from_query(self, client):
        data = client.post("/api/v1/predict", json={"query": "flood risk in kochi in malayalam"}).json()
        assert data["region"] == "Kochi, Kerala"
        assert data["eventType"] == "Flood"
        assert data["language"] == "ml"
        assert data["alerts"] == []

    def test_unknown_language(self, client):
        response = client.post("/api/v1/predict", json={"region": "Kochi, Kerala", "language": "fr"})
        assert response.status_code == 400
        assert response.json()["error"] == "UnknownLanguage"

    def test_recent_predictions(self, client):
        client.post("/api/v1/predict", json={"region": "Kochi, Kerala", "eventType": "Flood"})
        client.post("/api/v1/predict", json={"region": "Chennai, Tamil Nadu", "eventType": "Cyclone"})

        data = client.get("/api/v1/predictions").json()
        assert data["count"] == 2

        kochi = client.get("/api/v1/predictions", params={"region": "Kochi, Kerala"}).json()
        assert kochi["count"] == 1
        assert kochi["predictions"][0]["severity_score"] == pytest.approx(2.825)

    def test_limit_is_bounded(self, client):
        assert client.get("/api/v1/predictions", params={"limit": 0}).status_code == 422


class TestReferenceEndpoints:

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["observationProvider"] == "fixture"

    def test_regions(self, client):
        data = client.get("/api/v1/regions").json()
        multipliers = {r["name"]: r["multiplier"] for r in data["regions"]}
        assert multipliers["Mumbai, Maharashtra"] == 2.5
        assert multipliers["Kochi, Kerala"] == 1.4
        events = {e["name"]: e["multiplier"] for e in data["eventTypes"]}
        assert events["Storm Surge"] == 1.8

    def test_languages(self, client):
        data = client.get("/api/v1/languages").json()["languages"]
        assert len(data) == 10
        assert data["ks"]["direction"] == "rtl"
        assert data["ta"]["nativeName"] == "தமிழ்"
