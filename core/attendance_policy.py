"""Attendance gate for extra points."""

from utils.error_handler import ValidationError


class AttendancePolicy:
    """Decides whether the student attended enough classes to earn a bonus."""

    def has_minimum_attendance(self, has_reached_min_classes: bool) -> bool:
        """Returns the attendance flag unchanged once it is known to be a real bool.

        Raises:
            ValidationError: If the flag is anything other than True or False.
        """
        if not isinstance(has_reached_min_classes, bool):
            raise ValidationError(
                "Minimum attendance must be recorded as true or false.", field="has_reached_min_classes"
            )
        return has_reached_min_classes
