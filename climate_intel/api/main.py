"""FastAPI application."""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from climate_intel.core.exceptions import InvalidObservation, ProviderError, UnknownLanguage
from climate_intel.core.parser import query_parser
from climate_intel.core.predictor import build_default_service
from climate_intel.core.validation import validate_observation
from climate_intel.utils.config import settings
from climate_intel.utils.constants import EVENT_TYPES, REGION_COORDINATES

app = FastAPI(
    title="Climate Intel API",
    description="Weather severity and economic impact scoring for Indian regions",
    version=settings.app.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

service = build_default_service()


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ScoreRequest(CamelModel):
    region: str
    event_type: str = Field(alias="eventType")
    # Validated by validate_observation so every bad field is reported together
    observation: dict[str, Any]
    include_humidity: bool = Field(False, alias="includeHumidity")


class RiskFactorOut(BaseModel):
    name: str
    value: float
    color: str
    status: str


class ScoreResponse(CamelModel):
    severity_score: float = Field(alias="severityScore")
    risk_factors: list[RiskFactorOut] = Field(alias="riskFactors")
    economic_impact: float = Field(alias="economicImpact")
    alert_level: str = Field(alias="alertLevel")


class PredictRequest(CamelModel):
    query: Optional[str] = None
    region: str = "Chennai, Tamil Nadu"
    event_type: str = Field("Cyclone", alias="eventType")
    language: str = settings.localization.default_language


@app.exception_handler(InvalidObservation)
async def invalid_observation_handler(request: Request, exc: InvalidObservation):
    logger.warning(f"Rejected observation on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"error": "InvalidObservation", "fields": exc.fields})


@app.exception_handler(UnknownLanguage)
async def unknown_language_handler(request: Request, exc: UnknownLanguage):
    return JSONResponse(status_code=400, content={"error": "UnknownLanguage", "detail": str(exc)})


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    logger.error(f"Provider failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"error": "ProviderError", "detail": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "observationProvider": service.provider.name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/v1/score", response_model=ScoreResponse, response_model_by_alias=True)
def score(request: ScoreRequest):
    """Score a caller-supplied observation."""
    observation = validate_observation(request.observation)
    result = service.engine.score(observation, request.region, request.event_type, request.include_humidity)
    return result.to_dict()


@app.post("/api/v1/predict")
def predict(request: PredictRequest):
    """Fetch observations for a region and run the full prediction."""
    region, event_type, language = request.region, request.event_type, request.language
    if request.query:
        parsed = query_parser.parse(request.query)
        region, event_type = parsed.region, parsed.event_type
        if parsed.language != "en":
            language = parsed.language

    try:
        prediction = service.predict(region, event_type, language)
    except (InvalidObservation, UnknownLanguage, ProviderError):
        raise
    except Exception as e:
        logger.exception(f"Prediction failed for {region}/{event_type}")
        raise HTTPException(status_code=500, detail=str(e))

    return prediction.to_dict()


@app.get("/api/v1/predictions")
async def recent_predictions(
    region: Optional[str] = Query(None),
    limit: int = Query(20, ge=1, le=200),
):
    """Recent stored predictions, newest first."""
    records = service.store.recent(region=region, limit=limit)
    return {"count": len(records), "predictions": [r.to_dict() for r in records]}


@app.get("/api/v1/regions")
async def regions():
    return {
        "regions": [
            {
                "name": name,
                "latitude": lat,
                "longitude": lon,
                "multiplier": service.engine.tables.region_multipliers.get(name.split(",")[0], 1.0),
            }
            for name, (lat, lon) in REGION_COORDINATES.items()
        ],
        "eventTypes": [
            {"name": event, "multiplier": service.engine.tables.event_multipliers.get(event, 1.0)}
            for event in EVENT_TYPES
        ],
    }


@app.get("/api/v1/languages")
async def languages():
    catalog = service.catalog
    return {
        "languages": {
            code: {
                "name": info["name"],
                "nativeName": info["native_name"],
                "direction": catalog.language_direction(code),
            }
            for code, info in catalog.supported_languages().items()
        }
    }
