"""Section edits on a line: load the chain, apply one edit, persist the diff."""

import logging

from sqlalchemy.orm import Session

from subway.domain.chain import ChainDiff, SectionChain
from subway.domain.section import Section
from subway.exceptions import (
    BrokenChainError,
    DatabaseError,
    LineNotFoundError,
    StationNotFoundError,
    SubwayServiceError,
)
from subway.models.station import Station
from subway.services.validation import SubwayValidator
from subway.storage.interfaces import SectionStore, StationLookup
from subway.storage.repositories import LineRepository, SectionRepository, StationRepository

logger = logging.getLogger(__name__)


class LineSectionService:
    """Adds and removes stations on a line, one transaction per edit.

    Each edit locks the line row, rebuilds the line's SectionChain from the
    section store, applies the edit in memory and writes back only the
    sections that were removed and added. Any failure rolls the whole
    transaction back.
    """

    def __init__(self, session: Session):
        """
        Initialize section service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.line_repo = LineRepository(session)
        self.section_repo = SectionRepository(session)
        self.station_lookup: StationLookup = StationRepository(session)
        self.section_store: SectionStore = self.section_repo
        self.validator = SubwayValidator()

    def add_section_to_line(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> list[Station]:
        """
        Add a section to a line, extending it or splitting an existing section.

        Args:
            line_id: Line to edit
            up_station_id: Up station of the new section
            down_station_id: Down station of the new section
            distance: Positive distance of the new section

        Returns:
            Stations of the line from up terminal to down terminal

        Raises:
            LineNotFoundError: If the line does not exist
            StationNotFoundError: If either station is not registered
            InvalidDistanceError, SelfLoopError: If the section itself is invalid
            DuplicateSectionError, DisconnectedSectionError, DistanceOverflowError:
                If the section does not fit the line
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(line_id, "line_id")
        self.validator.validate_id(up_station_id, "up_station_id")
        self.validator.validate_id(down_station_id, "down_station_id")

        def edit(chain: SectionChain) -> ChainDiff:
            for station_id in (up_station_id, down_station_id):
                if not self.station_lookup.exists(station_id):
                    raise StationNotFoundError(station_id)
            return chain.add_section(Section.create(up_station_id, down_station_id, distance))

        return self._edit_line(line_id, edit, "add section")

    def remove_station_from_line(self, line_id: int, station_id: int) -> list[Station]:
        """
        Remove a station from a line, merging its two sections if it is interior.

        Args:
            line_id: Line to edit
            station_id: Station to remove

        Returns:
            Stations of the line from up terminal to down terminal

        Raises:
            LineNotFoundError: If the line does not exist
            StationNotFoundError: If the station is not registered
            SingleSectionRemainingError: If the line has only one section
            StationNotInChainError: If the station is not on the line
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(line_id, "line_id")
        self.validator.validate_id(station_id, "station_id")

        def edit(chain: SectionChain) -> ChainDiff:
            if not self.station_lookup.exists(station_id):
                raise StationNotFoundError(station_id)
            return chain.remove_station(station_id)

        return self._edit_line(line_id, edit, "remove station")

    def get_ordered_stations(self, line_id: int) -> list[Station]:
        """
        Get a line's stations from up terminal to down terminal.

        Raises:
            LineNotFoundError: If the line does not exist
            BrokenChainError: If the stored sections are not one simple path
        """
        self.validator.validate_id(line_id, "line_id")
        if self.line_repo.get_by_id(line_id) is None:
            raise LineNotFoundError(line_id)

        chain = SectionChain(self.section_store.load_sections(line_id))
        return self.resolve_stations(chain.ordered_stations())

    def resolve_stations(self, station_ids: list[int]) -> list[Station]:
        """Map ordered station IDs to station rows, keeping the order."""
        stations = self.station_lookup.get_by_ids(station_ids)
        missing = [station_id for station_id in station_ids if station_id not in stations]
        if missing:
            raise BrokenChainError(f"Line references unknown stations {missing}")
        return [stations[station_id] for station_id in station_ids]

    def _edit_line(self, line_id, edit, action: str) -> list[Station]:
        try:
            if self.section_repo.lock_line(line_id) is None:
                raise LineNotFoundError(line_id)

            chain = SectionChain(self.section_store.load_sections(line_id))
            diff = edit(chain)
            self.section_store.apply_diff(line_id, diff.removed_ids, diff.added)
            stations = self.resolve_stations(chain.ordered_stations())
            self.session.commit()

            logger.info(
                "Line %s: %s removed %d and added %d section(s), now %d stations over %d",
                line_id,
                action,
                len(diff.removed),
                len(diff.added),
                len(stations),
                chain.total_distance,
            )
            return stations

        except BrokenChainError:
            self.session.rollback()
            logger.exception("Line %s has a broken section chain", line_id)
            raise
        except SubwayServiceError as e:
            self.session.rollback()
            logger.info("Line %s: %s rejected (%s): %s", line_id, action, e.code, e)
            raise
        except Exception as e:
            self.session.rollback()
            logger.exception("Line %s: %s failed", line_id, action)
            raise DatabaseError(f"Failed to {action}: {str(e)}", e) from e
