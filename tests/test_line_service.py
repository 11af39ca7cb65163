"""Tests for line CRUD operations."""

import pytest

pytestmark = pytest.mark.unit

from subway.exceptions import (
    DuplicateError,
    InvalidDistanceError,
    LineNotFoundError,
    SelfLoopError,
    StationNotFoundError,
    ValidationError,
)
from subway.storage.repositories import SectionRepository
from tests.helpers import GANGNAM, JAMSIL, KONKUK, SEOLLEUNG, station_names


class TestCreateLine:
    """Tests for line creation."""

    def test_create_line_seeds_one_section(self, line_service, db_session, stations):
        route = line_service.create_line("2호선", "bg-green-600", KONKUK, GANGNAM, 50)
        assert route.line.id is not None
        assert route.line.name == "2호선"
        assert route.line.color == "bg-green-600"
        assert station_names(route.stations) == ["건대입구역", "강남역"]

        sections = SectionRepository(db_session).load_sections(route.line.id)
        assert [(s.up_station_id, s.down_station_id, s.distance) for s in sections] == [(1, 4, 50)]

    def test_create_line_duplicate_name(self, line_service, line_two):
        with pytest.raises(DuplicateError):
            line_service.create_line("2호선", "bg-red-600", JAMSIL, SEOLLEUNG, 10)

    def test_create_line_name_taken_at_insert(self, line_service, monkeypatch, line_two):
        """A name that passes the lookup but hits the unique index is still a duplicate."""
        monkeypatch.setattr(line_service.line_repo, "get_by_name", lambda name: None)
        with pytest.raises(DuplicateError) as exc_info:
            line_service.create_line("2호선", "bg-red-600", JAMSIL, SEOLLEUNG, 10)
        assert exc_info.value.field == "name"
        assert [line.name for line in line_service.list_lines()] == ["2호선"]

    def test_create_line_same_color_allowed(self, line_service, line_two):
        route = line_service.create_line("8호선", "bg-green-600", JAMSIL, SEOLLEUNG, 10)
        assert route.line.color == "bg-green-600"

    def test_create_line_unknown_station(self, line_service, stations):
        with pytest.raises(StationNotFoundError):
            line_service.create_line("2호선", "bg-green-600", KONKUK, 99, 50)
        assert line_service.list_lines() == []

    def test_create_line_invalid_distance(self, line_service, stations):
        with pytest.raises(InvalidDistanceError):
            line_service.create_line("2호선", "bg-green-600", KONKUK, GANGNAM, 0)
        assert line_service.list_lines() == []

    def test_create_line_self_loop(self, line_service, stations):
        with pytest.raises(SelfLoopError):
            line_service.create_line("2호선", "bg-green-600", KONKUK, KONKUK, 10)

    def test_create_line_blank_color(self, line_service, stations):
        with pytest.raises(ValidationError):
            line_service.create_line("2호선", " ", KONKUK, GANGNAM, 50)


class TestLineQueries:
    """Tests for reading, updating and deleting lines."""

    def test_get_line_with_stations(self, line_service, section_service, line_two):
        section_service.add_section_to_line(line_two.id, KONKUK, JAMSIL, 30)
        route = line_service.get_line(line_two.id)
        assert route.line.name == "2호선"
        assert station_names(route.stations) == ["건대입구역", "잠실역", "강남역"]

    def test_get_missing_line(self, line_service):
        with pytest.raises(LineNotFoundError):
            line_service.get_line(1)

    def test_list_lines(self, line_service, line_two):
        line_service.create_line("8호선", "bg-pink-600", JAMSIL, SEOLLEUNG, 10)
        assert [line.name for line in line_service.list_lines()] == ["2호선", "8호선"]

    def test_update_line(self, line_service, line_two):
        line = line_service.update_line(line_two.id, "신분당선", "bg-red-600")
        assert line.name == "신분당선"
        assert line_service.get_line(line_two.id).line.color == "bg-red-600"

    def test_update_line_keeps_own_name(self, line_service, line_two):
        line = line_service.update_line(line_two.id, "2호선", "bg-lime-600")
        assert line.color == "bg-lime-600"

    def test_update_line_name_taken(self, line_service, line_two):
        line_service.create_line("8호선", "bg-pink-600", JAMSIL, SEOLLEUNG, 10)
        with pytest.raises(DuplicateError):
            line_service.update_line(line_two.id, "8호선", "bg-pink-600")

    def test_update_missing_line(self, line_service):
        with pytest.raises(LineNotFoundError):
            line_service.update_line(5, "신분당선", "bg-red-600")

    def test_delete_line_removes_sections(self, line_service, section_service, db_session, line_two):
        section_service.add_section_to_line(line_two.id, KONKUK, JAMSIL, 30)
        line_service.delete_line(line_two.id)

        with pytest.raises(LineNotFoundError):
            line_service.get_line(line_two.id)
        assert SectionRepository(db_session).count(line_two.id) == 0

    def test_delete_missing_line(self, line_service):
        with pytest.raises(LineNotFoundError):
            line_service.delete_line(3)
