"""Main entry point for Climate Intel."""

import json
import sys

from loguru import logger

USAGE = """Usage: python main.py <command>

  api                                   Start the HTTP API
  score <observation.json> <region> <event>   Score an observation file
  predict <region> <event> [language] [--researcher]
  regions                               List known regions and multipliers"""


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    cmd = sys.argv[1]

    if cmd == "api":
        import uvicorn
        from climate_intel.utils.config import settings
        logger.info("Starting API server...")
        uvicorn.run(
            "climate_intel.api.main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.api.reload,
        )

    elif cmd == "score":
        from climate_intel.core import ClimateIntelError, ScoringEngine, validate_observation
        if len(sys.argv) < 5:
            print(USAGE)
            sys.exit(1)
        path, region, event_type = sys.argv[2:5]
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        try:
            observation = validate_observation(payload)
        except ClimateIntelError as e:
            logger.error(str(e))
            sys.exit(2)
        result = ScoringEngine().score(observation, region, event_type)
        print(json.dumps(result.to_dict(), indent=2))

    elif cmd == "predict":
        from climate_intel.core import ClimateIntelError
        from climate_intel.core.formatter import format_output
        from climate_intel.core.predictor import build_default_service
        args = [a for a in sys.argv[2:] if not a.startswith("--")]
        if len(args) < 2:
            print(USAGE)
            sys.exit(1)
        region, event_type = args[0], args[1]
        language = args[2] if len(args) > 2 else "en"
        stakeholder = "researcher" if "--researcher" in sys.argv else "emergency_manager"

        service = build_default_service()
        try:
            prediction = service.predict(region, event_type, language)
        except ClimateIntelError as e:
            logger.error(str(e))
            sys.exit(2)
        print(format_output(prediction, service.catalog, stakeholder))

    elif cmd == "regions":
        from climate_intel.core.scoring import DEFAULT_TABLES
        from climate_intel.utils.constants import REGION_COORDINATES
        for region, (lat, lon) in REGION_COORDINATES.items():
            multiplier = DEFAULT_TABLES.region_multipliers.get(region.split(",")[0], 1.0)
            print(f"{region:<32} {lat:>8.4f} {lon:>8.4f}  x{multiplier}")

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
