"""Value types shared by the scoring engine and its collaborators."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum


class AlertLevel(str, Enum):
    NONE = "None"
    WATCH = "Watch"
    WARNING = "Warning"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class Observation:
    """Normalized weather and satellite conditions for one region/event pair."""
    temperature: float
    humidity: float
    wind_speed: float
    pressure: float
    cloud_cover: float
    precipitation_intensity: float
    storm_activity: float

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "pressure": self.pressure,
            "cloudCover": self.cloud_cover,
            "precipitationIntensity": self.precipitation_intensity,
            "stormActivity": self.storm_activity,
        }


@dataclass(frozen=True)
class RiskFactor:
    name: str
    value: float
    status: str
    color: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value, "color": self.color, "status": self.status}


@dataclass(frozen=True)
class ScoreResult:
    """Output of one scoring call."""
    severity_score: float
    risk_factors: tuple
    economic_impact: float
    alert_level: AlertLevel

    def to_dict(self) -> dict:
        return {
            "severityScore": self.severity_score,
            "riskFactors": [f.to_dict() for f in self.risk_factors],
            "economicImpact": self.economic_impact,
            "alertLevel": self.alert_level.value,
        }


@dataclass(frozen=True)
class Alert:
    level: str
    message: str
    color: str
    actions: tuple = ()
    language: str = "en"

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "message": self.message,
            "color": self.color,
            "actions": list(self.actions),
            "language": self.language,
        }


@dataclass(frozen=True)
class Recommendation:
    priority: str
    category: str
    actions: tuple
    timeline: str
    regional_context: str = ""

    def to_dict(self) -> dict:
        data = {
            "priority": self.priority,
            "category": self.category,
            "actions": list(self.actions),
            "timeline": self.timeline,
        }
        if self.regional_context:
            data["regionalContext"] = self.regional_context
        return data


@dataclass
class KnowledgeContext:
    """Historical and regional context for a region/event pair."""
    historical_precedents: list = field(default_factory=list)
    lessons_learned: list = field(default_factory=list)
    regional_factors: list = field(default_factory=list)
    community_resources: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "historicalPrecedents": self.historical_precedents,
            "lessonsLearned": self.lessons_learned,
            "regionalFactors": self.regional_factors,
            "communityResources": self.community_resources,
        }


@dataclass
class Prediction:
    """Complete prediction output."""
    prediction_id: str
    timestamp: datetime
    region: str
    event_type: str
    language: str
    observation: Observation
    score: ScoreResult
    observation_source: str
    alerts: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)
    ethical_considerations: list = field(default_factory=list)
    regional_alert: str = ""
    context: KnowledgeContext = field(default_factory=KnowledgeContext)
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "predictionId": self.prediction_id,
            "timestamp": self.timestamp.isoformat(),
            "region": self.region,
            "eventType": self.event_type,
            "language": self.language,
            "observationSource": self.observation_source,
            "observation": self.observation.to_dict(),
            **self.score.to_dict(),
            "alerts": [a.to_dict() for a in self.alerts],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "ethicalConsiderations": self.ethical_considerations,
            "regionalAlert": self.regional_alert,
            **self.context.to_dict(),
        }


@dataclass(frozen=True)
class StoredPrediction:
    """Summary row kept by a persistence store."""
    prediction_id: str
    region: str
    event_type: str
    severity_score: float
    economic_impact: float
    alert_level: str
    created_at: str

    @classmethod
    def from_prediction(cls, prediction: Prediction) -> "StoredPrediction":
        return cls(
            prediction_id=prediction.prediction_id,
            region=prediction.region,
            event_type=prediction.event_type,
            severity_score=prediction.score.severity_score,
            economic_impact=prediction.score.economic_impact,
            alert_level=prediction.score.alert_level.value,
            created_at=prediction.timestamp.isoformat(),
        )

    def to_dict(self) -> dict:
        return asdict(self)
