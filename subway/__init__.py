"""Subway line management: stations, lines and their section chains."""

__version__ = "0.1.0"
