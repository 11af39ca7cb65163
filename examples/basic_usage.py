"""Basic usage example: build 2호선 and edit its stations."""

from subway.services import LineSectionService, LineService, StationService
from subway.storage import Database


def main():
    """Walk through creating a line and inserting and removing stations."""
    # Initialize database (uses SQLite by default)
    db = Database()

    # Create tables
    db.create_tables()

    with db.session() as session:
        station_service = StationService(session)
        line_service = LineService(session)
        section_service = LineSectionService(session)

        # Register stations
        konkuk = station_service.create_station("건대입구역")
        jamsil = station_service.create_station("잠실역")
        seolleung = station_service.create_station("선릉역")
        gangnam = station_service.create_station("강남역")

        # Create a line with its first section
        route = line_service.create_line("2호선", "bg-green-600", konkuk.id, gangnam.id, 50)
        print(f"Created line: {route.line.name} (ID: {route.line.id})")

        # Insert stations between the terminals
        section_service.add_section_to_line(route.line.id, konkuk.id, jamsil.id, 30)
        stations = section_service.add_section_to_line(route.line.id, seolleung.id, gangnam.id, 10)
        print("Stations:", " -> ".join(station.name for station in stations))

        # Remove an interior station; its two sections merge
        stations = section_service.remove_station_from_line(route.line.id, jamsil.id)
        print("After removing 잠실역:", " -> ".join(station.name for station in stations))


if __name__ == "__main__":
    main()
