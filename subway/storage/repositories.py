"""Repository pattern implementation for data access layer."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import delete, exists, func, or_, select
from sqlalchemy.orm import Session

from subway.domain.section import Section
from subway.models.line import Line
from subway.models.section import SectionRow
from subway.models.station import Station


class StationRepository:
    """Repository for station operations. Serves as the station lookup for section edits."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, station: Station) -> Station:
        """Create a new station."""
        self.session.add(station)
        self.session.flush()
        return station

    def get_by_id(self, station_id: int) -> Optional[Station]:
        """Get station by ID."""
        return self.session.get(Station, station_id)

    def find(self, station_id: int) -> Optional[Station]:
        """Station lookup: get station by ID or None."""
        return self.get_by_id(station_id)

    def exists(self, station_id: int) -> bool:
        """Station lookup: check if a station is registered."""
        return bool(self.session.scalar(select(exists().where(Station.id == station_id))))

    def get_by_name(self, name: str) -> Optional[Station]:
        """Get station by its unique name."""
        return self.session.scalar(select(Station).where(Station.name == name))

    def get_by_ids(self, station_ids: Iterable[int]) -> dict[int, Station]:
        """Get stations keyed by ID."""
        ids = list(station_ids)
        if not ids:
            return {}
        stmt = select(Station).where(Station.id.in_(ids))
        return {station.id: station for station in self.session.scalars(stmt)}

    def get_all(self, limit: int = 1000, offset: int = 0) -> list[Station]:
        """Get all stations ordered by ID."""
        stmt = select(Station).order_by(Station.id).limit(limit).offset(offset)
        return list(self.session.scalars(stmt))

    def count(self) -> int:
        """Count registered stations."""
        return self.session.scalar(select(func.count(Station.id))) or 0

    def delete(self, station_id: int) -> bool:
        """Delete a station by ID."""
        station = self.get_by_id(station_id)
        if station:
            self.session.delete(station)
            self.session.flush()
            return True
        return False


class LineRepository:
    """Repository for line operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, line: Line) -> Line:
        """Create a new line."""
        self.session.add(line)
        self.session.flush()
        return line

    def get_by_id(self, line_id: int) -> Optional[Line]:
        """Get line by ID."""
        return self.session.get(Line, line_id)

    def get_by_name(self, name: str) -> Optional[Line]:
        """Get line by its unique name."""
        return self.session.scalar(select(Line).where(Line.name == name))

    def get_all(self, limit: int = 1000, offset: int = 0) -> list[Line]:
        """Get all lines ordered by ID."""
        stmt = select(Line).order_by(Line.id).limit(limit).offset(offset)
        return list(self.session.scalars(stmt))

    def update_by_id(self, line_id: int, **kwargs: Any) -> Optional[Line]:
        """
        Update a line by ID with field updates.

        Args:
            line_id: Line identifier
            **kwargs: Fields to update (name, color)

        Returns:
            Updated line if found, None otherwise
        """
        line = self.get_by_id(line_id)
        if line is None:
            return None

        for key, value in kwargs.items():
            if hasattr(line, key):
                setattr(line, key, value)

        self.session.flush()
        return line

    def delete(self, line_id: int) -> bool:
        """Delete a line by ID (cascades to its sections)."""
        line = self.get_by_id(line_id)
        if line:
            self.session.delete(line)
            self.session.flush()
            return True
        return False


class SectionRepository:
    """Repository for section rows. Serves as the section store for chain edits."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def lock_line(self, line_id: int) -> Optional[Line]:
        """
        Load a line row for update so edits to one line run one at a time.

        Backends without row locks (SQLite) ignore FOR UPDATE; their
        database-level write lock serializes the transaction instead.

        Returns:
            The line, or None if it does not exist
        """
        stmt = select(Line).where(Line.id == line_id).with_for_update()
        return self.session.scalar(stmt)

    def get_by_line_id(self, line_id: int) -> list[SectionRow]:
        """Get all section rows of a line."""
        stmt = select(SectionRow).where(SectionRow.line_id == line_id).order_by(SectionRow.id)
        return list(self.session.scalars(stmt))

    def load_sections(self, line_id: int) -> list[Section]:
        """Section store: load a line's sections as chain values."""
        return [
            Section(row.up_station_id, row.down_station_id, row.distance, row.id)
            for row in self.get_by_line_id(line_id)
        ]

    def apply_diff(
        self, line_id: int, removed: set[int], added: Iterable[Section]
    ) -> list[SectionRow]:
        """
        Section store: delete removed section rows and insert added sections.

        Runs inside the caller's transaction; nothing is committed here.

        Args:
            line_id: Line the sections belong to
            removed: IDs of section rows to delete
            added: New sections to insert

        Returns:
            Inserted rows with their generated IDs
        """
        if removed:
            self.session.execute(
                delete(SectionRow).where(
                    SectionRow.line_id == line_id, SectionRow.id.in_(removed)
                )
            )

        rows = [
            SectionRow(
                line_id=line_id,
                up_station_id=section.up_station_id,
                down_station_id=section.down_station_id,
                distance=section.distance,
            )
            for section in added
        ]
        self.session.add_all(rows)
        self.session.flush()
        return rows

    def is_station_in_use(self, station_id: int) -> bool:
        """Check if any line still has a section touching the station."""
        stmt = select(
            exists().where(
                or_(
                    SectionRow.up_station_id == station_id,
                    SectionRow.down_station_id == station_id,
                )
            )
        )
        return bool(self.session.scalar(stmt))

    def count(self, line_id: Optional[int] = None) -> int:
        """Count section rows, optionally for one line."""
        query = select(func.count(SectionRow.id))
        if line_id is not None:
            query = query.where(SectionRow.line_id == line_id)
        return self.session.scalar(query) or 0
