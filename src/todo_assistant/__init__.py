"""Conversational to-do list assistant."""

__version__ = "0.1.0"
