"""Natural language query parser."""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class ParsedQuery:
    region: str = "Chennai, Tamil Nadu"
    event_type: str = "Cyclone"
    language: str = "en"
    stakeholder: str = "emergency_manager"
    confidence: float = 1.0


class QueryParser:
    """Parse natural language queries such as "flood risk in kochi, in malayalam"."""

    REGIONS = [
        (r"\b(mumbai|bombay)\b", "Mumbai, Maharashtra"),
        (r"\b(chennai|madras)\b", "Chennai, Tamil Nadu"),
        (r"\b(kolkata|calcutta)\b", "Kolkata, West Bengal"),
        (r"\bbhubaneswar\b", "Bhubaneswar, Odisha"),
        (r"\b(visakhapatnam|vizag)\b", "Visakhapatnam, Andhra Pradesh"),
        (r"\b(kochi|cochin)\b", "Kochi, Kerala"),
    ]
    EVENTS = [
        (r"\bstorm\s+surge\b", "Storm Surge"),
        (r"\b(heavy\s+rain(fall)?|downpour)\b", "Heavy Rainfall"),
        (r"\b(cyclone|hurricane|typhoon)\b", "Cyclone"),
        (r"\b(flood|flooding|inundation)\b", "Flood"),
        (r"\b(drought|dry\s+spell)\b", "Drought"),
        (r"\b(heat\s*wave|heat)\b", "Heatwave"),
    ]
    LANGUAGES = [
        (r"\bhindi\b", "hi"),
        (r"\bpunjabi\b", "pa"),
        (r"\bkashmiri\b", "ks"),
        (r"\bdogri\b", "doi"),
        (r"\bgujarati\b", "gu"),
        (r"\btelugu\b", "te"),
        (r"\btamil\b", "ta"),
        (r"\bkannada\b", "kn"),
        (r"\bmalayalam\b", "ml"),
    ]
    STAKEHOLDERS = [
        (r"\b(emergency|ops|manager)\b", "emergency_manager"),
        (r"\b(research|researcher|scientist|json)\b", "researcher"),
    ]

    def parse(self, query: str) -> ParsedQuery:
        if not query:
            return ParsedQuery(confidence=0.5)

        q = query.lower()
        result = ParsedQuery()

        region = self._match(q, self.REGIONS, None)
        event_type = self._match(q, self.EVENTS, None)

        result.region = region or result.region
        result.event_type = event_type or result.event_type
        result.language = self._match(q, self.LANGUAGES, "en")
        result.stakeholder = self._match(q, self.STAKEHOLDERS, "emergency_manager")
        # Each defaulted slot halves confidence
        if region is None:
            result.confidence *= 0.5
        if event_type is None:
            result.confidence *= 0.5

        return result

    def _match(self, text: str, patterns: list, default: Optional[str]):
        for pattern, value in patterns:
            if re.search(pattern, text, re.I):
                return value
        return default


query_parser = QueryParser()
