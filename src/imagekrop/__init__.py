"""Colour adjustment and crop geometry engine for interactive image editors."""

__version__ = "0.1.0"
