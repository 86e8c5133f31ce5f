"""Climate Intel: weather severity and economic impact scoring for Indian regions."""

__version__ = "0.1.0"
