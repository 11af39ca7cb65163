"""Line service layer for line CRUD operations."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from subway.domain.chain import SectionChain
from subway.exceptions import (
    DatabaseError,
    DuplicateError,
    LineNotFoundError,
    StationNotFoundError,
    SubwayServiceError,
)
from subway.models.line import Line
from subway.models.station import Station
from subway.services.line_section_service import LineSectionService
from subway.services.validation import SubwayValidator
from subway.storage.repositories import LineRepository, SectionRepository, StationRepository

logger = logging.getLogger(__name__)


@dataclass
class LineRoute:
    """A line together with its stations in travel order."""

    line: Line
    stations: list[Station]


class LineService:
    """Service layer for line CRUD operations with validation and error handling."""

    def __init__(self, session: Session):
        """
        Initialize line service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.line_repo = LineRepository(session)
        self.station_repo = StationRepository(session)
        self.section_repo = SectionRepository(session)
        self.section_service = LineSectionService(session)
        self.validator = SubwayValidator()

    def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> LineRoute:
        """
        Create a line seeded with its first section.

        Args:
            name: Line name, unique across lines
            color: Display color
            up_station_id: Up terminal of the seed section
            down_station_id: Down terminal of the seed section
            distance: Positive distance of the seed section

        Returns:
            The new line and its two stations

        Raises:
            ValidationError: If name, color or IDs are invalid
            DuplicateError: If a line with the same name exists
            StationNotFoundError: If either station is not registered
            InvalidDistanceError, SelfLoopError: If the seed section is invalid
            DatabaseError: If database operation fails
        """
        name = self.validator.validate_name(name)
        color = self.validator.validate_color(color)
        self.validator.validate_id(up_station_id, "up_station_id")
        self.validator.validate_id(down_station_id, "down_station_id")

        if self.line_repo.get_by_name(name) is not None:
            raise DuplicateError("Line", "name", name)
        for station_id in (up_station_id, down_station_id):
            if not self.station_repo.exists(station_id):
                raise StationNotFoundError(station_id)

        chain = SectionChain.seed(up_station_id, down_station_id, distance)

        try:
            line = self.line_repo.create(Line(name=name, color=color))
            self.section_repo.apply_diff(line.id, set(), chain.sections)
            stations = self.section_service.resolve_stations(chain.ordered_stations())
            self.session.commit()
            logger.info("Created line %s (%s) with %s", line.id, line.name, chain.sections[0])
            return LineRoute(line=line, stations=stations)

        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateError("Line", "name", name) from e
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to create line: {str(e)}", e) from e

    def get_line(self, line_id: int) -> LineRoute:
        """
        Get a line with its ordered stations.

        Raises:
            LineNotFoundError: If line is not found
            BrokenChainError: If the stored sections are not one simple path
        """
        self.validator.validate_id(line_id, "line_id")
        line = self.line_repo.get_by_id(line_id)
        if line is None:
            raise LineNotFoundError(line_id)
        return LineRoute(line=line, stations=self.section_service.get_ordered_stations(line_id))

    def list_lines(self) -> list[Line]:
        """Get all lines ordered by ID."""
        try:
            return self.line_repo.get_all()
        except Exception as e:
            raise DatabaseError(f"Failed to list lines: {str(e)}", e) from e

    def update_line(self, line_id: int, name: str, color: str) -> Line:
        """
        Rename or recolor a line.

        Raises:
            ValidationError: If name or color is invalid
            LineNotFoundError: If line is not found
            DuplicateError: If another line already uses the name
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(line_id, "line_id")
        name = self.validator.validate_name(name)
        color = self.validator.validate_color(color)

        try:
            if self.line_repo.get_by_id(line_id) is None:
                raise LineNotFoundError(line_id)
            same_name = self.line_repo.get_by_name(name)
            if same_name is not None and same_name.id != line_id:
                raise DuplicateError("Line", "name", name)

            line = self.line_repo.update_by_id(line_id, name=name, color=color)
            self.session.commit()
            return line

        except SubwayServiceError:
            self.session.rollback()
            raise
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateError("Line", "name", name) from e
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to update line: {str(e)}", e) from e

    def delete_line(self, line_id: int) -> None:
        """
        Delete a line and all of its sections.

        Raises:
            LineNotFoundError: If line is not found
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(line_id, "line_id")

        try:
            if not self.line_repo.delete(line_id):
                raise LineNotFoundError(line_id)
            self.session.commit()
            logger.info("Deleted line %s", line_id)

        except SubwayServiceError:
            self.session.rollback()
            raise
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to delete line: {str(e)}", e) from e
