"""Alert generation from severity scores."""

from climate_intel.core.models import Alert, AlertLevel
from climate_intel.core.scoring import classify_alert_level
from climate_intel.localization.catalog import MultilingualCatalog
from climate_intel.utils.constants import ALERT_COLORS


def generate_alerts(
    severity: float,
    event_type: str,
    region: str,
    catalog: MultilingualCatalog,
    language: str = "en",
) -> list:
    """Return the alerts to emit for a severity; empty below the warning threshold."""
    level = classify_alert_level(severity)
    actions = catalog.localized_recommendations(event_type, language)

    if level == AlertLevel.CRITICAL:
        message = (
            catalog.regional_alert(region, event_type, language)
            or f"High-risk {event_type} approaching {region}. Community action required."
        )
        return [Alert(
            level=level.value,
            message=message,
            color=ALERT_COLORS["Critical"],
            actions=tuple(actions),
            language=language,
        )]

    if level == AlertLevel.WARNING:
        return [Alert(
            level=level.value,
            message=f"Moderate {event_type} risk for {region}. Stay prepared.",
            color=ALERT_COLORS["Warning"],
            actions=tuple(actions[:2]),
            language=language,
        )]

    return []
