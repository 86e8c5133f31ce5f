"""Boundary validation for raw observation payloads."""

import math
from numbers import Real
from typing import Any, Mapping

from climate_intel.core.exceptions import InvalidObservation
from climate_intel.core.models import Observation

# field name -> accepted payload keys
OBSERVATION_FIELDS = {
    "temperature": ("temperature",),
    "humidity": ("humidity",),
    "wind_speed": ("windSpeed", "wind_speed"),
    "pressure": ("pressure",),
    "cloud_cover": ("cloudCover", "cloud_cover"),
    "precipitation_intensity": ("precipitationIntensity", "precipitation_intensity"),
    "storm_activity": ("stormActivity", "storm_activity"),
}


def _check_number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, Real):
        return "must be a number"
    try:
        number = float(value)
    except OverflowError:
        # ints too large for a float
        return "must be finite"
    if not math.isfinite(number):
        return "must be finite"
    return ""


def validate_observation(payload: Mapping[str, Any]) -> Observation:
    """Build an Observation from a camelCase or snake_case mapping.

    Every missing or non-finite field is collected before raising, so callers
    see the full list of problems in one InvalidObservation.
    """
    if not isinstance(payload, Mapping):
        raise InvalidObservation({"observation": "must be an object"})

    values = {}
    errors = {}
    for name, keys in OBSERVATION_FIELDS.items():
        key = next((k for k in keys if k in payload), None)
        if key is None:
            errors[keys[0]] = "missing"
            continue
        problem = _check_number(payload[key])
        if problem:
            errors[key] = problem
        else:
            values[name] = float(payload[key])

    if errors:
        raise InvalidObservation(errors)
    return Observation(**values)
