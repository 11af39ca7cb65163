"""Storage layer for the subway service."""

from subway.storage.database import Database, get_db
from subway.storage.repositories import (
    LineRepository,
    SectionRepository,
    StationRepository,
)

__all__ = [
    "Database",
    "get_db",
    "LineRepository",
    "SectionRepository",
    "StationRepository",
]
