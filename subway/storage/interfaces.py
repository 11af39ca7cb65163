"""Collaborator interfaces the section service depends on."""

from typing import Iterable, Optional, Protocol

from subway.domain.section import Section
from subway.models.station import Station


class StationLookup(Protocol):
    """Read-only access to the station registry."""

    def exists(self, station_id: int) -> bool: ...

    def find(self, station_id: int) -> Optional[Station]: ...

    def get_by_ids(self, station_ids: Iterable[int]) -> dict[int, Station]: ...


class SectionStore(Protocol):
    """Persistence boundary for one line's sections."""

    def load_sections(self, line_id: int) -> list[Section]: ...

    def apply_diff(self, line_id: int, removed: set[int], added: Iterable[Section]) -> object: ...
