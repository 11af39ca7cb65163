"""Shared pytest fixtures for subway tests."""

import os
import tempfile
from typing import Generator

import pytest

from subway.services.line_section_service import LineSectionService
from subway.services.line_service import LineService
from subway.services.station_service import StationService
from subway.storage.database import Database, reset_db
from tests.helpers import GANGNAM, KONKUK, STATION_NAMES


@pytest.fixture(scope="function")
def temp_db() -> Generator[Database, None, None]:
    """
    Create a temporary SQLite database for testing.

    Yields:
        Database instance with tables created
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    reset_db()

    database = Database(f"sqlite:///{db_path}")
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()
    reset_db()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def db_session(temp_db):
    """Get a database session from temp_db."""
    with temp_db.session() as session:
        yield session


@pytest.fixture
def station_service(db_session):
    """Create a station service instance."""
    return StationService(db_session)


@pytest.fixture
def line_service(db_session):
    """Create a line service instance."""
    return LineService(db_session)


@pytest.fixture
def section_service(db_session):
    """Create a line section service instance."""
    return LineSectionService(db_session)


@pytest.fixture
def stations(station_service):
    """Register 건대입구역, 잠실역, 선릉역 and 강남역 (IDs 1-4)."""
    return [station_service.create_station(name) for name in STATION_NAMES]


@pytest.fixture
def line_two(line_service, stations):
    """Create 2호선 seeded with 건대입구역 -> 강남역, distance 50."""
    route = line_service.create_line(
        name="2호선",
        color="bg-green-600",
        up_station_id=KONKUK,
        down_station_id=GANGNAM,
        distance=50,
    )
    return route.line
