"""Tests for the section chain aggregate."""

import random

import pytest

pytestmark = pytest.mark.unit

from subway.domain.chain import SectionChain
from subway.domain.section import Section
from subway.exceptions import (
    BrokenChainError,
    DisconnectedSectionError,
    DistanceOverflowError,
    DuplicateSectionError,
    SingleSectionRemainingError,
    StationNotInChainError,
    SubwayServiceError,
)
from tests.helpers import assert_simple_path, chain_of, edges_of


class TestOrderedStations:
    """Tests for walking the chain from up terminal to down terminal."""

    def test_seed_chain(self):
        chain = SectionChain.seed(1, 4, 50)
        assert chain.ordered_stations() == [1, 4]
        assert chain.up_terminal() == 1
        assert chain.down_terminal() == 4

    def test_sections_in_any_order(self):
        chain = chain_of((3, 4, 10), (1, 2, 30), (2, 3, 10))
        assert chain.ordered_stations() == [1, 2, 3, 4]
        assert chain.total_distance == 50

    def test_empty_chain_rejected(self):
        with pytest.raises(BrokenChainError):
            SectionChain([])

    def test_branching_chain_rejected(self):
        with pytest.raises(BrokenChainError):
            chain_of((1, 2, 10), (1, 3, 10))

    def test_joining_chain_rejected(self):
        with pytest.raises(BrokenChainError):
            chain_of((1, 3, 10), (2, 3, 10))

    def test_cycle_rejected(self):
        with pytest.raises(BrokenChainError):
            chain_of((1, 2, 10), (2, 3, 10), (3, 1, 10))

    def test_disconnected_pieces_rejected(self):
        with pytest.raises(BrokenChainError):
            chain_of((1, 2, 10), (3, 4, 10))

    def test_path_plus_separate_cycle_rejected(self):
        with pytest.raises(BrokenChainError):
            chain_of((1, 2, 10), (3, 4, 10), (4, 3, 10))


class TestAddSection:
    """Tests for inserting sections."""

    def test_split_sharing_up_station(self):
        chain = SectionChain.seed(1, 4, 50)
        diff = chain.add_section(Section.create(1, 2, 30))
        assert edges_of(chain) == {(1, 2, 30), (2, 4, 20)}
        assert chain.ordered_stations() == [1, 2, 4]
        assert len(diff.removed) == 1
        assert len(diff.added) == 2

    def test_split_sharing_down_station(self):
        chain = SectionChain.seed(1, 4, 50)
        chain.add_section(Section.create(2, 4, 20))
        assert edges_of(chain) == {(1, 2, 30), (2, 4, 20)}
        assert chain.ordered_stations() == [1, 2, 4]

    def test_split_interior_section(self):
        chain = chain_of((1, 2, 30), (2, 4, 20))
        chain.add_section(Section.create(3, 4, 10))
        assert edges_of(chain) == {(1, 2, 30), (2, 3, 10), (3, 4, 10)}
        assert chain.ordered_stations() == [1, 2, 3, 4]

    def test_extend_down_terminal(self):
        chain = SectionChain.seed(1, 4, 50)
        diff = chain.add_section(Section.create(4, 5, 15))
        assert chain.ordered_stations() == [1, 4, 5]
        assert diff.removed == ()
        assert chain.total_distance == 65

    def test_extend_up_terminal(self):
        chain = SectionChain.seed(1, 4, 50)
        chain.add_section(Section.create(5, 1, 30))
        assert chain.ordered_stations() == [5, 1, 4]
        assert chain.total_distance == 80

    def test_extension_ignores_distance_of_neighbor(self):
        chain = SectionChain.seed(1, 4, 5)
        chain.add_section(Section.create(4, 5, 500))
        assert chain.ordered_stations() == [1, 4, 5]

    def test_split_total_distance_unchanged(self):
        chain = SectionChain.seed(1, 4, 50)
        chain.add_section(Section.create(1, 2, 30))
        assert chain.total_distance == 50

    @pytest.mark.parametrize("distance", [50, 51, 100])
    def test_split_distance_overflow(self, distance):
        chain = SectionChain.seed(1, 4, 50)
        with pytest.raises(DistanceOverflowError):
            chain.add_section(Section.create(1, 2, distance))
        assert edges_of(chain) == {(1, 4, 50)}

    def test_duplicate_section(self):
        chain = SectionChain.seed(1, 4, 50)
        with pytest.raises(DuplicateSectionError):
            chain.add_section(Section.create(1, 4, 50))

    def test_duplicate_section_reversed(self):
        chain = SectionChain.seed(1, 4, 50)
        with pytest.raises(DuplicateSectionError):
            chain.add_section(Section.create(4, 1, 10))

    def test_both_stations_present_but_not_adjacent(self):
        chain = chain_of((1, 2, 30), (2, 4, 20))
        with pytest.raises(DuplicateSectionError):
            chain.add_section(Section.create(1, 4, 10))

    def test_disconnected_section(self):
        chain = SectionChain.seed(1, 4, 50)
        with pytest.raises(DisconnectedSectionError):
            chain.add_section(Section.create(5, 6, 10))
        assert chain.ordered_stations() == [1, 4]


class TestRemoveStation:
    """Tests for removing stations."""

    def test_remove_interior_station_merges(self):
        chain = chain_of((1, 2, 30), (2, 4, 20))
        diff = chain.remove_station(2)
        assert edges_of(chain) == {(1, 4, 50)}
        assert len(diff.removed) == 2
        assert len(diff.added) == 1

    def test_remove_up_terminal(self):
        chain = chain_of((1, 2, 30), (2, 4, 20))
        diff = chain.remove_station(1)
        assert edges_of(chain) == {(2, 4, 20)}
        assert chain.up_terminal() == 2
        assert diff.added == ()

    def test_remove_down_terminal(self):
        chain = chain_of((1, 2, 30), (2, 4, 20))
        chain.remove_station(4)
        assert edges_of(chain) == {(1, 2, 30)}
        assert chain.down_terminal() == 2

    @pytest.mark.parametrize("station_id", [1, 4, 99])
    def test_single_section_remaining(self, station_id):
        chain = SectionChain.seed(1, 4, 50)
        with pytest.raises(SingleSectionRemainingError):
            chain.remove_station(station_id)
        assert edges_of(chain) == {(1, 4, 50)}

    def test_station_not_in_chain(self):
        chain = chain_of((1, 3, 40), (3, 4, 10))
        with pytest.raises(StationNotInChainError):
            chain.remove_station(2)
        assert edges_of(chain) == {(1, 3, 40), (3, 4, 10)}

    def test_removed_ids_reported(self):
        chain = SectionChain([Section.create(1, 2, 30, 11), Section.create(2, 4, 20, 12)])
        diff = chain.remove_station(2)
        assert diff.removed_ids == {11, 12}
        assert diff.added[0].id is None


class TestAcceptanceScenario:
    """The 2호선 walk-through: 건대입구(1), 잠실(2), 선릉(3), 강남(4)."""

    def test_add_split_then_remove(self):
        chain = SectionChain.seed(1, 4, 50)
        chain.add_section(Section.create(1, 2, 30))
        chain.add_section(Section.create(3, 4, 10))
        assert chain.ordered_stations() == [1, 2, 3, 4]

        chain.remove_station(2)
        assert edges_of(chain) == {(1, 3, 40), (3, 4, 10)}
        assert chain.ordered_stations() == [1, 3, 4]


class TestChainInvariants:
    """Random edit sequences keep the chain a single simple path."""

    @pytest.mark.parametrize("seed", range(10))
    def test_random_edits_preserve_path(self, seed):
        rng = random.Random(seed)
        chain = SectionChain.seed(1, 2, 1000)
        line_length = 1000
        next_station = 3

        for _ in range(200):
            before = edges_of(chain)
            ordered_before = chain.ordered_stations()
            try:
                if rng.random() < 0.6:
                    if rng.random() < 0.5:
                        up, down = rng.choice(ordered_before), next_station
                    else:
                        up, down = next_station, rng.choice(ordered_before)
                    distance = rng.randint(1, 400)
                    is_extension = up == ordered_before[-1] or down == ordered_before[0]
                    chain.add_section(Section.create(up, down, distance))
                    next_station += 1
                    if is_extension:
                        line_length += distance
                else:
                    station_id = rng.choice(ordered_before + [next_station + 100])
                    removed = [s for s in chain.sections if s.has_station(station_id)]
                    chain.remove_station(station_id)
                    if len(removed) == 1:
                        line_length -= removed[0].distance
            except SubwayServiceError:
                assert edges_of(chain) == before
                assert chain.ordered_stations() == ordered_before

            assert_simple_path(chain)
            assert chain.total_distance == line_length
            assert len(chain) >= 1
