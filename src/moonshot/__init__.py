"""Moonshot: fly a craft from Earth to the Moon under a live trajectory forecast."""

__version__ = "0.1.0"
