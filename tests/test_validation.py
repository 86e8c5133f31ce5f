"""
Observation validation at the request boundary
"""

import math

import pytest

from climate_intel.core.exceptions import InvalidObservation
from climate_intel.core.validation import validate_observation

VALID_PAYLOAD = {
    "temperature": 35,
    "humidity": 70,
    "windSpeed": 15,
    "pressure": 1005,
    "cloudCover": 0,
    "precipitationIntensity": 0,
    "stormActivity": 0,
}


def test_camel_case_payload():
    obs = validate_observation(VALID_PAYLOAD)
    assert obs.wind_speed == 15.0
    assert obs.precipitation_intensity == 0.0
    assert isinstance(obs.temperature, float)


def test_snake_case_payload():
    payload = {
        "temperature": 35,
        "humidity": 70,
        "wind_speed": 15,
        "pressure": 1005,
        "cloud_cover": 0,
        "precipitation_intensity": 0,
        "storm_activity": 0,
    }
    assert validate_observation(payload) == validate_observation(VALID_PAYLOAD)


def test_missing_fields_are_all_reported():
    payload = dict(VALID_PAYLOAD)
    del payload["windSpeed"]
    del payload["stormActivity"]
    with pytest.raises(InvalidObservation) as exc:
        validate_observation(payload)
    assert exc.value.fields == {"windSpeed": "missing", "stormActivity": "missing"}


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_values_are_rejected(bad):
    payload = dict(VALID_PAYLOAD, humidity=bad)
    with pytest.raises(InvalidObservation) as exc:
        validate_observation(payload)
    assert exc.value.fields == {"humidity": "must be finite"}


@pytest.mark.parametrize("bad", ["35", None, True, [35]])
def test_non_numeric_values_are_rejected(bad):
    payload = dict(VALID_PAYLOAD, temperature=bad)
    with pytest.raises(InvalidObservation) as exc:
        validate_observation(payload)
    assert "temperature" in exc.value.fields


def test_non_mapping_is_rejected():
    with pytest.raises(InvalidObservation):
        validate_observation([1, 2, 3])


def test_out_of_range_values_are_accepted():
    payload = dict(VALID_PAYLOAD, humidity=250, windSpeed=-10)
    obs = validate_observation(payload)
    assert obs.humidity == 250.0
    assert obs.wind_speed == -10.0


def test_integer_too_large_for_float_is_rejected():
    payload = dict(VALID_PAYLOAD, temperature=10 ** 400, windSpeed=-(10 ** 400))
    with pytest.raises(InvalidObservation) as exc:
        validate_observation(payload)
    assert exc.value.fields == {"temperature": "must be finite", "windSpeed": "must be finite"}


def test_large_integer_within_float_range_is_accepted():
    obs = validate_observation(dict(VALID_PAYLOAD, pressure=10 ** 300))
    assert obs.pressure == float(10 ** 300)
