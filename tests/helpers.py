"""Test utilities shared across test modules."""

from subway.domain.chain import SectionChain
from subway.domain.section import Section

# Station IDs in registration order, matching the 2호선 acceptance scenario
KONKUK = 1
JAMSIL = 2
SEOLLEUNG = 3
GANGNAM = 4

STATION_NAMES = ["건대입구역", "잠실역", "선릉역", "강남역"]


def chain_of(*edges: tuple[int, int, int]) -> SectionChain:
    """Build a chain from (up, down, distance) triples."""
    return SectionChain(Section.create(up, down, distance) for up, down, distance in edges)


def edges_of(chain: SectionChain) -> set[tuple[int, int, int]]:
    """Chain sections as (up, down, distance) triples, ignoring IDs."""
    return {(s.up_station_id, s.down_station_id, s.distance) for s in chain.sections}


def station_names(stations) -> list[str]:
    return [station.name for station in stations]


def assert_simple_path(chain: SectionChain):
    """Assert consecutive ordered stations are exactly the chain's sections."""
    ordered = chain.ordered_stations()
    assert len(ordered) == len(set(ordered)), f"Stations repeat: {ordered}"
    pairs = set(zip(ordered, ordered[1:]))
    assert pairs == {(s.up_station_id, s.down_station_id) for s in chain.sections}
