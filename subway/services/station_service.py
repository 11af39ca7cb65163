"""Station service layer for the global station registry."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from subway.exceptions import (
    DatabaseError,
    DuplicateError,
    StationNotFoundError,
    SubwayServiceError,
    ValidationError,
)
from subway.models.station import Station
from subway.services.validation import SubwayValidator
from subway.storage.repositories import SectionRepository, StationRepository

logger = logging.getLogger(__name__)


class StationService:
    """Service layer for station operations with validation and error handling."""

    def __init__(self, session: Session):
        """
        Initialize station service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.station_repo = StationRepository(session)
        self.section_repo = SectionRepository(session)
        self.validator = SubwayValidator()

    def create_station(self, name: str) -> Station:
        """
        Register a new station.

        Args:
            name: Station name, unique across the registry

        Returns:
            Created station with ID

        Raises:
            ValidationError: If name is invalid
            DuplicateError: If a station with the same name exists
            DatabaseError: If database operation fails
        """
        name = self.validator.validate_name(name)

        if self.station_repo.get_by_name(name) is not None:
            raise DuplicateError("Station", "name", name)

        try:
            station = self.station_repo.create(Station(name=name))
            self.session.commit()
            logger.info("Created station %s (%s)", station.id, station.name)
            return station

        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateError("Station", "name", name) from e
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to create station: {str(e)}", e) from e

    def get_station(self, station_id: int) -> Station:
        """
        Get station by ID.

        Raises:
            ValidationError: If station_id is invalid
            StationNotFoundError: If station is not found
        """
        self.validator.validate_id(station_id, "station_id")
        station = self.station_repo.get_by_id(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    def list_stations(self) -> list[Station]:
        """Get all stations ordered by ID."""
        try:
            return self.station_repo.get_all()
        except Exception as e:
            raise DatabaseError(f"Failed to list stations: {str(e)}", e) from e

    def delete_station(self, station_id: int) -> None:
        """
        Delete a station that no line uses.

        Raises:
            ValidationError: If station_id is invalid or the station is on a line
            StationNotFoundError: If station is not found
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(station_id, "station_id")

        try:
            if not self.station_repo.exists(station_id):
                raise StationNotFoundError(station_id)
            if self.section_repo.is_station_in_use(station_id):
                raise ValidationError(
                    f"Station {station_id} is still part of a line", "station_id"
                )
            self.station_repo.delete(station_id)
            self.session.commit()
            logger.info("Deleted station %s", station_id)

        except SubwayServiceError:
            self.session.rollback()
            raise
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to delete station: {str(e)}", e) from e
