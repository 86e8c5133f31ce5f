"""Configuration loader for Climate Intel."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from climate_intel.utils.constants import (
    DEFAULT_EVENT_MULTIPLIERS,
    DEFAULT_REGION_MULTIPLIERS,
    DEFAULT_WEIGHTS,
)

load_dotenv()


class OpenMeteoConfig(BaseModel):
    base_url: str = "https://api.open-meteo.com/v1/forecast"
    timeout_seconds: int = 30
    cache_dir: str = "data/cache/open_meteo"
    cache_ttl_minutes: int = 30
    timezone: str = "Asia/Kolkata"


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True
    workers: int = 1
    cors_origins: list[str] = ["*"]


class ScoringConfig(BaseModel):
    weights: dict[str, float] = dict(DEFAULT_WEIGHTS)
    region_multipliers: dict[str, float] = dict(DEFAULT_REGION_MULTIPLIERS)
    event_multipliers: dict[str, float] = dict(DEFAULT_EVENT_MULTIPLIERS)


class LocalizationConfig(BaseModel):
    default_language: str = "en"
    catalog_path: Optional[str] = None


class PredictorConfig(BaseModel):
    fallback_on_provider_error: bool = True
    include_humidity: bool = False
    observation_source: str = "open_meteo"


class StorageConfig(BaseModel):
    backend: str = "memory"
    path: str = "data/predictions.json"
    max_records: Optional[int] = 1000


class LoggingConfig(BaseModel):
    level: str = "DEBUG"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"
    to_file: bool = True


class AppConfig(BaseModel):
    name: str = "climate_intel"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = True


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    api: APIConfig = APIConfig()
    open_meteo: OpenMeteoConfig = OpenMeteoConfig()
    scoring: ScoringConfig = ScoringConfig()
    localization: LocalizationConfig = LocalizationConfig()
    predictor: PredictorConfig = PredictorConfig()
    storage: StorageConfig = StorageConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("OPEN_METEO_BASE_URL"):
        yaml_config.setdefault("open_meteo", {})["base_url"] = os.getenv("OPEN_METEO_BASE_URL")
    if os.getenv("CLIMATE_LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("CLIMATE_LOG_LEVEL")
    if os.getenv("CLIMATE_STORE_PATH"):
        storage = yaml_config.setdefault("storage", {})
        storage["backend"] = "json"
        storage["path"] = os.getenv("CLIMATE_STORE_PATH")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
