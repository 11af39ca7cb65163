"""Section chain aggregate: the ordered path of one line's sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from subway.domain.section import Section
from subway.exceptions import (
    BrokenChainError,
    DisconnectedSectionError,
    DuplicateSectionError,
    SingleSectionRemainingError,
    StationNotInChainError,
)


@dataclass(frozen=True)
class ChainDiff:
    """Sections removed from and added to a chain by one edit."""

    removed: tuple[Section, ...] = field(default_factory=tuple)
    added: tuple[Section, ...] = field(default_factory=tuple)

    @property
    def removed_ids(self) -> set[int]:
        return {section.id for section in self.removed if section.id is not None}


class SectionChain:
    """All sections of one line, kept as a single simple path.

    Edits build the complete resulting section list, check it is still one
    path, and only then replace the current list. A rejected edit leaves the
    chain untouched.
    """

    def __init__(self, sections: Iterable[Section]):
        """
        Build a chain from stored sections.

        Args:
            sections: Sections of one line in any order

        Raises:
            BrokenChainError: If the sections do not form a single simple path
        """
        self._sections: list[Section] = list(sections)
        if not self._sections:
            raise BrokenChainError("A line must have at least one section")
        self._check_path(self._sections)

    @classmethod
    def seed(cls, up_station_id: int, down_station_id: int, distance: int) -> SectionChain:
        """Create the chain of a new line from its first section."""
        return cls([Section.create(up_station_id, down_station_id, distance)])

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def total_distance(self) -> int:
        return sum(section.distance for section in self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, station_id: object) -> bool:
        return any(section.has_station(station_id) for section in self._sections)

    def station_ids(self) -> set[int]:
        stations = set()
        for section in self._sections:
            stations.update(section.station_ids)
        return stations

    def up_terminal(self) -> int:
        return self.ordered_stations()[0]

    def down_terminal(self) -> int:
        return self.ordered_stations()[-1]

    def ordered_stations(self) -> list[int]:
        """
        List station ids from the up terminal to the down terminal.

        Raises:
            BrokenChainError: If the sections branch, loop or are disconnected
        """
        return self._check_path(self._sections)

    def add_section(self, new_section: Section) -> ChainDiff:
        """
        Insert a section, extending the line or splitting an existing section.

        Args:
            new_section: Validated section to insert

        Returns:
            Sections removed and added by the edit

        Raises:
            DuplicateSectionError: If both stations are already on the line
            DisconnectedSectionError: If neither station is on the line
            DistanceOverflowError: If a split section is not strictly longer
        """
        stations = self.station_ids()
        up_known = new_section.up_station_id in stations
        down_known = new_section.down_station_id in stations

        if up_known and down_known:
            raise DuplicateSectionError(new_section.up_station_id, new_section.down_station_id)
        if not up_known and not down_known:
            raise DisconnectedSectionError(
                new_section.up_station_id, new_section.down_station_id
            )

        ordered = self.ordered_stations()
        if up_known and new_section.up_station_id == ordered[-1]:
            diff = ChainDiff(added=(new_section,))
        elif down_known and new_section.down_station_id == ordered[0]:
            diff = ChainDiff(added=(new_section,))
        else:
            if up_known:
                existing = self._section_starting_at(new_section.up_station_id)
            else:
                existing = self._section_ending_at(new_section.down_station_id)
            residual = existing.split_against(new_section)
            diff = ChainDiff(removed=(existing,), added=(new_section, residual))

        self._commit(diff)
        return diff

    def remove_station(self, station_id: int) -> ChainDiff:
        """
        Remove a station, dropping a terminal section or merging two sections.

        Args:
            station_id: Station to take off the line

        Returns:
            Sections removed and added by the edit

        Raises:
            SingleSectionRemainingError: If the line has only one section
            StationNotInChainError: If the station is not on the line
        """
        if len(self._sections) == 1:
            raise SingleSectionRemainingError(station_id)
        if station_id not in self:
            raise StationNotInChainError(station_id)

        incoming = self._find(lambda s: s.down_station_id == station_id)
        outgoing = self._find(lambda s: s.up_station_id == station_id)

        if incoming is not None and outgoing is not None:
            merged = incoming.merge_with(outgoing)
            diff = ChainDiff(removed=(incoming, outgoing), added=(merged,))
        else:
            diff = ChainDiff(removed=(incoming or outgoing,))

        self._commit(diff)
        return diff

    def _commit(self, diff: ChainDiff) -> None:
        candidate = [s for s in self._sections if not any(s is r for r in diff.removed)]
        candidate.extend(diff.added)
        self._check_path(candidate)
        self._sections = candidate

    def _find(self, predicate) -> Section | None:
        for section in self._sections:
            if predicate(section):
                return section
        return None

    def _section_starting_at(self, station_id: int) -> Section:
        section = self._find(lambda s: s.up_station_id == station_id)
        if section is None:
            raise BrokenChainError(f"No section starts at interior station {station_id}")
        return section

    def _section_ending_at(self, station_id: int) -> Section:
        section = self._find(lambda s: s.down_station_id == station_id)
        if section is None:
            raise BrokenChainError(f"No section ends at interior station {station_id}")
        return section

    @staticmethod
    def _check_path(sections: list[Section]) -> list[int]:
        """Walk the sections from the up terminal; fail on anything but one simple path."""
        next_station: dict[int, int] = {}
        down_stations: set[int] = set()
        for section in sections:
            if section.up_station_id in next_station:
                raise BrokenChainError(f"Line branches at station {section.up_station_id}")
            if section.down_station_id in down_stations:
                raise BrokenChainError(f"Line merges at station {section.down_station_id}")
            next_station[section.up_station_id] = section.down_station_id
            down_stations.add(section.down_station_id)

        starts = [station for station in next_station if station not in down_stations]
        if len(starts) != 1:
            raise BrokenChainError(f"Expected one up terminal, found {len(starts)}")

        ordered = [starts[0]]
        visited = {starts[0]}
        current = starts[0]
        while current in next_station:
            current = next_station[current]
            if current in visited:
                raise BrokenChainError(f"Line loops back to station {current}")
            visited.add(current)
            ordered.append(current)

        if len(ordered) != len(sections) + 1:
            raise BrokenChainError("Line sections are not all connected")
        return ordered
