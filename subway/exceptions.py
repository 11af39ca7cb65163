"""Custom exceptions for subway line and section operations."""


class SubwayServiceError(Exception):
    """Base exception for subway service errors."""

    code = "SubwayServiceError"


class ValidationError(SubwayServiceError):
    """Raised when input validation fails."""

    code = "ValidationError"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(SubwayServiceError):
    """Raised when a resource is not found."""

    code = "NotFound"

    def __init__(self, resource_type: str, resource_id: int | str):
        message = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id


class LineNotFoundError(NotFoundError):
    """Raised when a line is not found."""

    code = "LineNotFound"

    def __init__(self, line_id: int):
        super().__init__("Line", line_id)


class StationNotFoundError(NotFoundError):
    """Raised when a station is not registered."""

    code = "StationNotFound"

    def __init__(self, station_id: int):
        super().__init__("Station", station_id)


class DuplicateError(SubwayServiceError):
    """Raised when attempting to create a duplicate resource."""

    code = "Duplicate"

    def __init__(self, resource_type: str, field: str, value: str):
        message = f"{resource_type} with {field} '{value}' already exists"
        super().__init__(message)
        self.resource_type = resource_type
        self.field = field
        self.value = value


class DatabaseError(SubwayServiceError):
    """Raised when a database operation fails."""

    code = "DatabaseError"

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class SectionError(SubwayServiceError):
    """Base exception for rejected section chain edits."""

    code = "SectionError"


class InvalidDistanceError(SectionError):
    """Raised when a section distance is not a positive integer."""

    code = "InvalidDistance"

    def __init__(self, distance: int):
        super().__init__(f"Section distance must be a positive integer, got {distance!r}")
        self.distance = distance


class SelfLoopError(SectionError):
    """Raised when a section starts and ends at the same station."""

    code = "SelfLoop"

    def __init__(self, station_id: int):
        super().__init__(f"Section cannot start and end at station {station_id}")
        self.station_id = station_id


class DuplicateSectionError(SectionError):
    """Raised when both stations of a new section are already on the line."""

    code = "DuplicateSection"

    def __init__(self, up_station_id: int, down_station_id: int):
        super().__init__(
            f"Stations {up_station_id} and {down_station_id} are both already on the line"
        )
        self.up_station_id = up_station_id
        self.down_station_id = down_station_id


class DisconnectedSectionError(SectionError):
    """Raised when a new section cannot be linked to the line."""

    code = "DisconnectedSection"

    def __init__(self, up_station_id: int, down_station_id: int):
        super().__init__(
            f"Neither station {up_station_id} nor {down_station_id} is on the line"
        )
        self.up_station_id = up_station_id
        self.down_station_id = down_station_id


class DistanceOverflowError(SectionError):
    """Raised when an inserted section is not shorter than the section it splits."""

    code = "DistanceOverflow"

    def __init__(self, new_distance: int, existing_distance: int):
        super().__init__(
            f"Section distance {new_distance} must be shorter than "
            f"the existing section distance {existing_distance}"
        )
        self.new_distance = new_distance
        self.existing_distance = existing_distance


class UnmergeableError(SectionError):
    """Raised when two sections do not share exactly one station."""

    code = "Unmergeable"

    def __init__(self, message: str = "Sections must share exactly one station to merge"):
        super().__init__(message)


class SingleSectionRemainingError(SectionError):
    """Raised when removing a station would leave the line without a section."""

    code = "SingleSectionRemaining"

    def __init__(self, station_id: int):
        super().__init__(
            f"Cannot remove station {station_id}: the line has only one section"
        )
        self.station_id = station_id


class StationNotInChainError(SectionError):
    """Raised when the station to remove is not on the line."""

    code = "StationNotInChain"

    def __init__(self, station_id: int):
        super().__init__(f"Station {station_id} is not on the line")
        self.station_id = station_id


class BrokenChainError(SubwayServiceError):
    """Raised when stored sections do not form a single simple path.

    This signals a defect or corrupted data, never a bad request.
    """

    code = "BrokenChain"
