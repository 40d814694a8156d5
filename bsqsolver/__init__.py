"""Biggest-square finder for maps of free cells and obstacles, with a small printf engine."""

__version__ = "0.1.0"