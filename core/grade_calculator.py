"""Final grade calculation from evaluations, attendance and extra points."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Sequence

import config
from core.attendance_policy import AttendancePolicy
from core.evaluation import Evaluation
from core.extra_points_policy import ExtraPointsPolicy
from core.rounding import round2
from utils.error_handler import ValidationError
from utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class GradeCalculationRequest:
    """Everything the calculator needs for one student."""
    evaluations: List[Evaluation]
    has_reached_min_classes: bool
    all_years_teachers: List[bool]


@dataclass(frozen=True)
class GradeCalculationResult:
    weighted_average: float
    extra_points_applied: float
    final_grade: float
    attendance_satisfied: bool
    extra_policy_approved: bool

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def total_weight(evaluations: Sequence[Evaluation]) -> float:
    return sum(evaluation.weight for evaluation in evaluations)


def remaining_weight(evaluations: Sequence[Evaluation]) -> float:
    """Weight still unassigned out of TOTAL_WEIGHT, never below zero."""
    return round2(max(0, config.TOTAL_WEIGHT - total_weight(evaluations)))


def ensure_weights_total(evaluations: Sequence[Evaluation]) -> None:
    """Raises ValidationError unless the weights add up to TOTAL_WEIGHT."""
    if abs(total_weight(evaluations) - config.TOTAL_WEIGHT) > config.WEIGHT_TOLERANCE:
        raise ValidationError(
            f"The weights must add up to exactly {config.TOTAL_WEIGHT}.", field="evaluations"
        )


class GradeCalculator:
    """Combines the attendance and extra points policies into a final grade.

    The calculator keeps no state between calls; the policies it wraps are
    fixed at construction.
    """

    def __init__(self, attendance_policy: AttendancePolicy, extra_points_policy: ExtraPointsPolicy):
        self.attendance_policy = attendance_policy
        self.extra_points_policy = extra_points_policy

    def calculate(self, request: GradeCalculationRequest) -> GradeCalculationResult:
        """Validates the request and computes the final grade.

        Args:
            request: Evaluations, attendance flag and yearly teacher approvals.

        Returns:
            The weighted average, both policy decisions, the extra points
            actually applied and the capped final grade.

        Raises:
            ValidationError: If any evaluation rule or policy input is violated.
                No partial result is produced.
        """
        self._ensure_valid_evaluations(request.evaluations)
        attendance_satisfied = self.attendance_policy.has_minimum_attendance(request.has_reached_min_classes)
        extra_policy_approved = self.extra_points_policy.can_apply(request.all_years_teachers)

        weighted_average = self._compute_weighted_average(request.evaluations)
        extra_points_applied = self.extra_points_policy.compute_extra_points(
            attendance_satisfied and extra_policy_approved
        )
        final_grade = self.extra_points_policy.clamp_final_grade(weighted_average + extra_points_applied)

        result = GradeCalculationResult(
            weighted_average=weighted_average,
            extra_points_applied=round2(extra_points_applied),
            final_grade=final_grade,
            attendance_satisfied=attendance_satisfied,
            extra_policy_approved=extra_policy_approved,
        )
        logger.debug(f"Grade calculated from {len(request.evaluations)} evaluation(s): {result.as_dict()}")
        return result

    def _ensure_valid_evaluations(self, evaluations: Sequence[Evaluation]) -> None:
        if not isinstance(evaluations, (list, tuple)) or len(evaluations) == 0:
            raise ValidationError("At least one evaluation must be recorded.", field="evaluations")

        if len(evaluations) > config.MAX_EVALUATIONS:
            raise ValidationError(
                f"The maximum number of evaluations is {config.MAX_EVALUATIONS}.", field="evaluations"
            )

        if not all(isinstance(evaluation, Evaluation) for evaluation in evaluations):
            raise ValidationError("Every evaluation must be an Evaluation instance.", field="evaluations")

        ensure_weights_total(evaluations)

    def _compute_weighted_average(self, evaluations: Sequence[Evaluation]) -> float:
        # Full precision until here; the average is rounded once for output
        weighted_sum = sum(evaluation.score * evaluation.weight for evaluation in evaluations)
        return round2(weighted_sum / config.TOTAL_WEIGHT)
