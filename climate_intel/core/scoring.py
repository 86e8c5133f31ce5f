"""
Weather Severity & Economic Impact Scoring Engine

Turns a validated Observation into a severity score (1-10), an ordered
risk-factor breakdown, an alert level and an economic-impact estimate.
Every function here is pure: lookup tables are passed in, nothing is cached
and nothing is random.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np
from loguru import logger

from climate_intel.core.models import AlertLevel, Observation, RiskFactor, ScoreResult
from climate_intel.utils.constants import (
    DEFAULT_EVENT_MULTIPLIERS,
    DEFAULT_REGION_MULTIPLIERS,
    DEFAULT_WEIGHTS,
    RISK_FACTOR_COLORS,
)

# Normalization denominators mapping raw units onto [0, 1]
NORMALIZERS = {
    "temperature": 50.0,
    "humidity": 100.0,
    "wind_speed": 100.0,
    "precipitation": 50.0,
    "storm_activity": 100.0,
}

MIN_SEVERITY = 1.0
MAX_SEVERITY = 10.0
CRITICAL_THRESHOLD = 7.0
WARNING_THRESHOLD = 5.0
BASE_COST_PER_SEVERITY = 0.3


def _frozen(mapping: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ScoringTables:
    """Weights and multiplier tables used by the engine."""
    weights: Mapping[str, float] = field(default_factory=lambda: _frozen(DEFAULT_WEIGHTS))
    region_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_REGION_MULTIPLIERS)
    )
    event_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_EVENT_MULTIPLIERS)
    )

    def __post_init__(self):
        missing = set(DEFAULT_WEIGHTS) - set(self.weights)
        if missing:
            raise ValueError(f"Missing weights: {', '.join(sorted(missing))}")
        unknown = set(self.weights) - set(DEFAULT_WEIGHTS)
        if unknown:
            raise ValueError(f"Unknown weights: {', '.join(sorted(unknown))}")

        weights = dict(self.weights)
        total_weight = sum(weights.values())
        if not total_weight > 0:
            raise ValueError(f"Weights must sum to a positive value, got {total_weight}")
        if not np.isclose(total_weight, 1.0):
            logger.warning(f"Weights sum to {total_weight:.2f}, normalizing to 1.0")
            weights = {k: v / total_weight for k, v in weights.items()}

        object.__setattr__(self, "weights", _frozen(weights))
        object.__setattr__(self, "region_multipliers", _frozen(self.region_multipliers))
        object.__setattr__(self, "event_multipliers", _frozen(self.event_multipliers))

    @classmethod
    def from_config(cls, config) -> "ScoringTables":
        return cls(
            weights=config.weights,
            region_multipliers=config.region_multipliers,
            event_multipliers=config.event_multipliers,
        )


DEFAULT_TABLES = ScoringTables()


def compute_severity(observation: Observation, tables: ScoringTables = DEFAULT_TABLES) -> float:
    """Weighted sum of normalized inputs, scaled to 1-10 and clamped."""
    w = tables.weights
    severity = (
        observation.temperature / NORMALIZERS["temperature"] * w["temperature"]
        + observation.humidity / NORMALIZERS["humidity"] * w["humidity"]
        + observation.wind_speed / NORMALIZERS["wind_speed"] * w["wind_speed"]
        + observation.precipitation_intensity / NORMALIZERS["precipitation"] * w["precipitation"]
        + observation.storm_activity / NORMALIZERS["storm_activity"] * w["storm_activity"]
    )
    return min(max(severity * 10, MIN_SEVERITY), MAX_SEVERITY)


def compute_risk_factors(observation: Observation, include_humidity: bool = False) -> tuple:
    """Risk factors in display order: wind, storm, precipitation, temperature (, humidity)."""
    o = observation
    factors = [
        RiskFactor(
            name="Wind Speed",
            value=min(o.wind_speed / 50 * 100, 100),
            status="High" if o.wind_speed > 30 else "Moderate",
            color=RISK_FACTOR_COLORS["Wind Speed"],
        ),
        RiskFactor(
            name="Storm Activity",
            value=o.storm_activity,
            status="Critical" if o.storm_activity > 70 else "Moderate",
            color=RISK_FACTOR_COLORS["Storm Activity"],
        ),
        RiskFactor(
            name="Precipitation",
            value=o.precipitation_intensity * 2,
            status="High" if o.precipitation_intensity > 25 else "Low",
            color=RISK_FACTOR_COLORS["Precipitation"],
        ),
        RiskFactor(
            name="Temperature",
            value=min(o.temperature / 45 * 100, 100),
            status="Extreme" if o.temperature > 40 else "Normal",
            color=RISK_FACTOR_COLORS["Temperature"],
        ),
    ]
    if include_humidity:
        factors.append(RiskFactor(
            name="Humidity",
            value=min(o.humidity, 100),
            status="High" if o.humidity > 80 else "Normal",
            color=RISK_FACTOR_COLORS["Humidity"],
        ))
    return tuple(factors)


def region_multiplier(region: str, tables: ScoringTables = DEFAULT_TABLES) -> float:
    # Exact, case-sensitive match on the city before the first comma
    city = region.split(",")[0]
    multiplier = tables.region_multipliers.get(city)
    if multiplier is None:
        logger.debug(f"No region multiplier for '{city}', using 1.0")
        return 1.0
    return multiplier


def event_multiplier(event_type: str, tables: ScoringTables = DEFAULT_TABLES) -> float:
    return tables.event_multipliers.get(event_type, 1.0)


def round_currency(amount: float) -> float:
    """Round half up to two decimals."""
    return math.floor(amount * 100 + 0.5) / 100


def compute_economic_impact(
    severity: float,
    region: str,
    event_type: str,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    base_cost = severity * BASE_COST_PER_SEVERITY
    impact = base_cost * region_multiplier(region, tables) * event_multiplier(event_type, tables)
    return max(round_currency(impact), 0.0)


def classify_alert_level(severity: float) -> AlertLevel:
    if severity >= CRITICAL_THRESHOLD:
        return AlertLevel.CRITICAL
    if severity >= WARNING_THRESHOLD:
        return AlertLevel.WARNING
    return AlertLevel.NONE


class ScoringEngine:
    """Scoring engine bound to one set of lookup tables."""

    def __init__(self, tables: Optional[ScoringTables] = None):
        self.tables = tables if tables is not None else DEFAULT_TABLES

    def compute_severity(self, observation: Observation) -> float:
        return compute_severity(observation, self.tables)

    def compute_risk_factors(self, observation: Observation, include_humidity: bool = False) -> tuple:
        return compute_risk_factors(observation, include_humidity)

    def compute_economic_impact(self, severity: float, region: str, event_type: str) -> float:
        return compute_economic_impact(severity, region, event_type, self.tables)

    def classify_alert_level(self, severity: float) -> AlertLevel:
        return classify_alert_level(severity)

    def score(
        self,
        observation: Observation,
        region: str,
        event_type: str,
        include_humidity: bool = False,
    ) -> ScoreResult:
        severity = self.compute_severity(observation)
        return ScoreResult(
            severity_score=severity,
            risk_factors=self.compute_risk_factors(observation, include_humidity),
            economic_impact=self.compute_economic_impact(severity, region, event_type),
            alert_level=self.classify_alert_level(severity),
        )
