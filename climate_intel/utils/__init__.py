"""Utilities module."""
from climate_intel.utils.config import Settings, get_settings, settings
from climate_intel.utils.logger import setup_logging
