"""Service layer for business logic and validation."""

from subway.services.line_section_service import LineSectionService
from subway.services.line_service import LineRoute, LineService
from subway.services.station_service import StationService

__all__ = ["LineSectionService", "LineRoute", "LineService", "StationService"]
