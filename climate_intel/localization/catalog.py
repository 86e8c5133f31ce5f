"""Multilingual catalog for Indian languages.

The catalog is immutable data: it is read from YAML once and handed to the
components that localize output (alerts, recommendations, formatters).
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml
from loguru import logger

from climate_intel.core.exceptions import UnknownLanguage

DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.yaml"
DEFAULT_LANGUAGE = "en"


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


class MultilingualCatalog:
    """Read-only lookups over translation, alert and recommendation tables."""

    def __init__(self, data: Mapping[str, Any]):
        self._languages = _freeze(dict(data.get("languages", {})))
        self._translations = _freeze(dict(data.get("translations", {})))
        self._phrases = _freeze(dict(data.get("common_phrases", {})))
        self._regional_alerts = _freeze(dict(data.get("regional_alerts", {})))
        self._recommendations = _freeze(dict(data.get("recommendations", {})))
        self._ethical_guidance = _freeze(dict(data.get("ethical_guidance", {})))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "MultilingualCatalog":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        catalog = cls(data)
        logger.info(f"Loaded multilingual catalog: {len(catalog._languages)} languages from {path}")
        return catalog

    def supported_languages(self) -> Mapping[str, Mapping[str, Any]]:
        return self._languages

    def is_supported(self, language: str) -> bool:
        return language in self._languages

    def require_language(self, language: str) -> str:
        if not self.is_supported(language):
            raise UnknownLanguage(language)
        return language

    def translate(self, key: str, language: str = DEFAULT_LANGUAGE) -> str:
        translation = self._translations.get(key)
        if not translation:
            return key
        return translation.get(language) or translation.get(DEFAULT_LANGUAGE) or key

    def translate_text(self, text: str, language: str) -> str:
        """Translate a common phrase, returning the input when no translation exists."""
        translation = self._phrases.get(text)
        if translation and translation.get(language):
            return translation[language]
        return text

    def regional_alert(self, region: str, event_type: str, language: str = DEFAULT_LANGUAGE) -> str:
        region_alerts = self._regional_alerts.get(region)
        if not region_alerts:
            return ""
        event_alerts = region_alerts.get(event_type.lower())
        if not event_alerts:
            return ""
        return event_alerts.get(language) or event_alerts.get(DEFAULT_LANGUAGE) or ""

    def localized_recommendations(self, event_type: str, language: str = DEFAULT_LANGUAGE) -> tuple:
        event_recs = self._recommendations.get(event_type.lower())
        if not event_recs:
            return ()
        return event_recs.get(language) or event_recs.get(DEFAULT_LANGUAGE) or ()

    def ethical_guidance(self, kind: str, language: str = DEFAULT_LANGUAGE) -> str:
        guidance = self._ethical_guidance.get(kind)
        if not guidance:
            return "Follow ethical guidelines"
        return guidance.get(language) or guidance.get(DEFAULT_LANGUAGE) or "Follow ethical guidelines"

    def language_direction(self, language: str) -> str:
        info = self._languages.get(language)
        return "rtl" if info and info.get("rtl") else "ltr"

    def format_number(self, number: float, language: str = DEFAULT_LANGUAGE) -> str:
        """Format with Indian digit grouping (lakh/crore), up to three decimals."""
        sign = "-" if number < 0 else ""
        text = f"{abs(number):.3f}".rstrip("0").rstrip(".")
        integer, _, fraction = text.partition(".")

        if len(integer) > 3:
            head, tail = integer[:-3], integer[-3:]
            groups = []
            while len(head) > 2:
                groups.insert(0, head[-2:])
                head = head[:-2]
            if head:
                groups.insert(0, head)
            integer = ",".join(groups + [tail])

        return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"


@lru_cache(maxsize=None)
def load_catalog(path: Optional[str] = None) -> MultilingualCatalog:
    return MultilingualCatalog.from_yaml(path or DEFAULT_CATALOG_PATH)
