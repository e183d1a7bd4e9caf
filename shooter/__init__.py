"""A top-down pygame game built from entities, components and attributes."""

__version__ = "0.1.0"