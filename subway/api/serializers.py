"""Model serialization for HTTP responses."""

from typing import Any

from subway.models.line import Line
from subway.models.station import Station
from subway.services.line_service import LineRoute


def serialize_station(station: Station) -> dict[str, Any]:
    return {"id": station.id, "name": station.name}


def serialize_line(line: Line, stations: list[Station] | None = None) -> dict[str, Any]:
    """
    Serialize a line, with its stations when they are known.

    Args:
        line: Line model instance
        stations: Ordered stations of the line, if loaded

    Returns:
        Dictionary representation of the line
    """
    result: dict[str, Any] = {"id": line.id, "name": line.name, "color": line.color}
    if stations is not None:
        result["stations"] = [serialize_station(station) for station in stations]
    return result


def serialize_line_route(route: LineRoute) -> dict[str, Any]:
    return serialize_line(route.line, route.stations)
