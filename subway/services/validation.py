"""Input validation for station, line and section requests."""

from subway.exceptions import ValidationError


class SubwayValidator:
    """Validates request data according to business rules."""

    # Validation constants
    NAME_MIN_LENGTH = 1
    NAME_MAX_LENGTH = 255
    COLOR_MAX_LENGTH = 50

    @staticmethod
    def validate_name(name: str, field: str = "name") -> str:
        """
        Validate a station or line name.

        Args:
            name: Name to validate
            field: Field name reported in the error

        Returns:
            Name with surrounding whitespace removed

        Raises:
            ValidationError: If name is invalid
        """
        if not isinstance(name, str):
            raise ValidationError("Name must be a string", field)
        name = name.strip()
        if len(name) < SubwayValidator.NAME_MIN_LENGTH:
            raise ValidationError("Name is required and cannot be empty", field)
        if len(name) > SubwayValidator.NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name must be at most {SubwayValidator.NAME_MAX_LENGTH} characters", field
            )
        return name

    @staticmethod
    def validate_color(color: str) -> str:
        """
        Validate a line color (e.g. "bg-green-600").

        Raises:
            ValidationError: If color is invalid
        """
        if not isinstance(color, str) or not color.strip():
            raise ValidationError("Color is required and cannot be empty", "color")
        color = color.strip()
        if len(color) > SubwayValidator.COLOR_MAX_LENGTH:
            raise ValidationError(
                f"Color must be at most {SubwayValidator.COLOR_MAX_LENGTH} characters", "color"
            )
        return color

    @staticmethod
    def validate_id(value: int, field: str = "id") -> None:
        """
        Validate a numeric identifier.

        Raises:
            ValidationError: If value is not a positive integer
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field} must be an integer", field)
        if value <= 0:
            raise ValidationError(f"{field} must be positive", field)
