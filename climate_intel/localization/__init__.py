"""Localization module."""
from climate_intel.localization.catalog import MultilingualCatalog, load_catalog
