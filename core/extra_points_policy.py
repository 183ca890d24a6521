"""Teacher-approved extra points and the final grade ceiling."""

import math
from typing import Sequence

import config
from core.rounding import round2
from utils.error_handler import ValidationError
from utils.logger import get_logger

logger = get_logger()


class ExtraPointsPolicy:
    """Holds the bonus value and the cap applied to final grades.

    Both settings are rounded to 2 decimals and fixed after construction.
    """

    def __init__(self, max_points: float, cap_grade_at: float):
        if not _is_finite_number(max_points) or not 0 <= max_points <= config.MAX_EXTRA_POINTS:
            raise ValidationError(
                f"Extra points must be between 0 and {config.MAX_EXTRA_POINTS}.", field="max_points"
            )
        if not _is_finite_number(cap_grade_at) or cap_grade_at <= 0:
            raise ValidationError("The final grade cap must be greater than 0.", field="cap_grade_at")

        self._max_points = round2(max_points)
        self._cap_grade_at = round2(cap_grade_at)

    @property
    def max_points(self) -> float:
        return self._max_points

    @property
    def cap_grade_at(self) -> float:
        return self._cap_grade_at

    def can_apply(self, all_years_teachers: Sequence[bool]) -> bool:
        """Checks that the teachers of every year approved the bonus.

        One False entry vetoes the bonus for all years.

        Args:
            all_years_teachers: One approval flag per academic year.

        Returns:
            True only if every entry is True.

        Raises:
            ValidationError: If the list is empty, longer than
                MAX_TEACHER_POLICIES, or holds anything but booleans.
        """
        if not isinstance(all_years_teachers, (list, tuple)) or len(all_years_teachers) == 0:
            raise ValidationError(
                "At least one yearly teacher policy must be recorded.", field="all_years_teachers"
            )
        if len(all_years_teachers) > config.MAX_TEACHER_POLICIES:
            raise ValidationError(
                f"The policy list must not exceed {config.MAX_TEACHER_POLICIES} entries.",
                field="all_years_teachers",
            )
        if not all(isinstance(approval, bool) for approval in all_years_teachers):
            raise ValidationError("Teacher decisions must be true or false.", field="all_years_teachers")

        approved = all(all_years_teachers)
        logger.debug(f"Extra points approval across {len(all_years_teachers)} year(s): {approved}")
        return approved

    def compute_extra_points(self, apply: bool) -> float:
        return self._max_points if apply else 0

    def clamp_final_grade(self, grade: float) -> float:
        return min(self._cap_grade_at, round2(grade))

    def __repr__(self) -> str:
        return f"ExtraPointsPolicy(max_points={self._max_points}, cap_grade_at={self._cap_grade_at})"


def _is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
