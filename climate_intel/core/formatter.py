"""Output formatters for stakeholders."""

import json

from climate_intel.core.models import AlertLevel, Prediction
from climate_intel.localization.catalog import MultilingualCatalog


class EmergencyManagerFormatter:
    """Markdown action list for emergency managers."""

    def __init__(self, catalog: MultilingualCatalog):
        self.catalog = catalog

    def format(self, prediction: Prediction) -> str:
        score = prediction.score
        obs = prediction.observation
        lang = prediction.language
        active = score.alert_level != AlertLevel.NONE
        fmt = self.catalog.format_number

        lines = [
            f"**ALERT: {prediction.event_type} {'Active' if active else 'Monitor'}**",
            f"**Region:** {prediction.region} | **Time:** {prediction.timestamp.strftime('%Y-%m-%d %H:%M')} UTC",
            f"**Prediction ID:** {prediction.prediction_id}",
            "",
            "**CONDITIONS:**",
            f"- Temperature: {obs.temperature:.1f}°C | Humidity: {obs.humidity:.0f}%",
            f"- Wind: {obs.wind_speed:.1f} km/h | Pressure: {obs.pressure:.0f} hPa",
            f"- Precipitation: {obs.precipitation_intensity:.1f} mm/h | Storm activity: {obs.storm_activity:.0f}",
            f"- Source: {prediction.observation_source}",
            "",
            f"**SEVERITY:** {score.severity_score:.2f}/10 ({score.alert_level.value})",
            f"**ECONOMIC IMPACT:** {fmt(score.economic_impact, lang)}",
            "",
            "**RISK FACTORS:**",
        ]
        for f in score.risk_factors:
            lines.append(f"- {f.name}: {f.value:.0f} [{f.status}]")
        lines.append("")

        if prediction.alerts:
            lines.append("**ALERTS:**")
            for i, a in enumerate(prediction.alerts, 1):
                lines.append(f"{i}. [{a.level.upper()}] {a.message}")
                for action in a.actions:
                    lines.append(f"   → {action}")
            lines.append("")
        else:
            lines.append("**No alert issued.**")
            lines.append("")

        if prediction.recommendations:
            lines.append("**RECOMMENDATIONS:**")
            for r in prediction.recommendations:
                lines.append(f"- {r.category} ({r.timeline}, {r.priority}): {'; '.join(r.actions)}")

        lines.extend([
            "---",
            f"*Regional factors: {', '.join(prediction.context.regional_factors)}*",
        ])

        return "\n".join(lines)


class ResearcherFormatter:
    """JSON with full details."""

    def format(self, prediction: Prediction) -> dict:
        return prediction.to_dict()

    def to_json(self, prediction: Prediction) -> str:
        return json.dumps(self.format(prediction), indent=2, ensure_ascii=False, default=str)


def format_output(
    prediction: Prediction,
    catalog: MultilingualCatalog,
    stakeholder: str = "emergency_manager",
) -> str:
    if stakeholder == "researcher":
        return ResearcherFormatter().to_json(prediction)
    return EmergencyManagerFormatter(catalog).format(prediction)
