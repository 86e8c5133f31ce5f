"""Error types raised by Climate Intel."""


class ClimateIntelError(Exception):
    """Base class for all Climate Intel errors."""


class InvalidObservation(ClimateIntelError):
    """An observation is missing required fields or holds non-finite values."""

    def __init__(self, fields: dict):
        self.fields = dict(fields)
        detail = ", ".join(f"{name}: {reason}" for name, reason in sorted(self.fields.items()))
        super().__init__(f"Invalid observation ({detail})")


class ProviderError(ClimateIntelError):
    """A collaborator (weather API, store) failed to deliver data."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class UnknownLanguage(ClimateIntelError):
    """Requested language is not in the multilingual catalog."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")
