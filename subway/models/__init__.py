"""Database models for the subway service."""

from subway.models.line import Line
from subway.models.section import SectionRow
from subway.models.station import Station

__all__ = ["Line", "SectionRow", "Station"]
