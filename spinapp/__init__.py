"""Configuration resolution, HTTP routing, request preparation and asset handling for component-based web applications."""

__version__ = "0.1.0"