"""Core module."""
from climate_intel.core.exceptions import ClimateIntelError, InvalidObservation, ProviderError, UnknownLanguage
from climate_intel.core.models import AlertLevel, Observation, RiskFactor, ScoreResult
from climate_intel.core.scoring import (
    ScoringEngine,
    ScoringTables,
    classify_alert_level,
    compute_economic_impact,
    compute_risk_factors,
    compute_severity,
)
from climate_intel.core.validation import validate_observation
