"""Section value: a directed, distance-weighted edge between two stations."""

from __future__ import annotations

from dataclasses import dataclass

from subway.exceptions import (
    DistanceOverflowError,
    InvalidDistanceError,
    SelfLoopError,
    UnmergeableError,
)


@dataclass(frozen=True)
class Section:
    """An edge of a line's chain.

    ``id`` is the store's primary key and is None for sections that have not
    been persisted yet. It takes no part in the chain logic.
    """

    up_station_id: int
    down_station_id: int
    distance: int
    id: int | None = None

    @classmethod
    def create(
        cls,
        up_station_id: int,
        down_station_id: int,
        distance: int,
        section_id: int | None = None,
    ) -> Section:
        """
        Create a validated section.

        Args:
            up_station_id: Station the section starts at
            down_station_id: Station the section ends at
            distance: Positive integer distance
            section_id: Persistent id, if the section is already stored

        Returns:
            New section

        Raises:
            InvalidDistanceError: If distance is not a positive integer
            SelfLoopError: If both stations are the same
        """
        if isinstance(distance, bool) or not isinstance(distance, int) or distance <= 0:
            raise InvalidDistanceError(distance)
        if up_station_id == down_station_id:
            raise SelfLoopError(up_station_id)
        return cls(up_station_id, down_station_id, distance, section_id)

    @property
    def station_ids(self) -> tuple[int, int]:
        return (self.up_station_id, self.down_station_id)

    def has_station(self, station_id: int) -> bool:
        return station_id in self.station_ids

    def connects(self, station_a: int, station_b: int) -> bool:
        """Check if this section joins the two stations, in either orientation."""
        return {self.up_station_id, self.down_station_id} == {station_a, station_b}

    def split_against(self, new_section: Section) -> Section:
        """
        Split this section around a shorter section sharing one endpoint.

        If the new section shares the up station, the residual runs from the
        new section's down station to this section's down station. If it shares
        the down station, the residual runs from this section's up station to
        the new section's up station.

        Args:
            new_section: Section strictly contained in this one

        Returns:
            Residual section covering the remaining distance (unsaved)

        Raises:
            DistanceOverflowError: If the new section is not strictly shorter
            UnmergeableError: If the sections share no matching endpoint
        """
        if new_section.up_station_id == self.up_station_id:
            residual_up, residual_down = new_section.down_station_id, self.down_station_id
        elif new_section.down_station_id == self.down_station_id:
            residual_up, residual_down = self.up_station_id, new_section.up_station_id
        else:
            raise UnmergeableError(
                "New section must share its up or down station with the section it splits"
            )

        if new_section.distance >= self.distance:
            raise DistanceOverflowError(new_section.distance, self.distance)

        return Section.create(residual_up, residual_down, self.distance - new_section.distance)

    def merge_with(self, other: Section) -> Section:
        """
        Merge with an adjoining section into one spanning both.

        Order does not matter: whichever section ends at the shared station
        provides the up station of the result.

        Raises:
            UnmergeableError: If the sections do not share exactly one station
        """
        shared = set(self.station_ids) & set(other.station_ids)
        if len(shared) != 1:
            raise UnmergeableError()

        if self.down_station_id == other.up_station_id:
            first, second = self, other
        elif other.down_station_id == self.up_station_id:
            first, second = other, self
        else:
            # Both start or both end at the shared station.
            raise UnmergeableError("Sections must run in the same direction to merge")

        return Section.create(
            first.up_station_id, second.down_station_id, first.distance + second.distance
        )
