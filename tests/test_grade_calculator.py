import unittest

from core.attendance_policy import AttendancePolicy
from core.evaluation import Evaluation
from core.extra_points_policy import ExtraPointsPolicy
from core.grade_calculator import (
    GradeCalculator,
    GradeCalculationRequest,
    GradeCalculationResult,
    remaining_weight,
)
from utils.error_handler import ValidationError

BASE_EVALUATIONS = [
    Evaluation(name="Midterm", score=15, weight=40),
    Evaluation(name="Project", score=18, weight=60),
]


def make_calculator(max_points=1, cap=20):
    return GradeCalculator(AttendancePolicy(), ExtraPointsPolicy(max_points=max_points, cap_grade_at=cap))


def make_request(evaluations=None, attendance=True, approvals=None):
    return GradeCalculationRequest(
        evaluations=BASE_EVALUATIONS if evaluations is None else evaluations,
        has_reached_min_classes=attendance,
        all_years_teachers=[True] if approvals is None else approvals,
    )


class GradeCalculatorTests(unittest.TestCase):
    def test_applies_extra_points_with_attendance_and_approval(self):
        result = make_calculator(1).calculate(make_request(approvals=[True, True]))
        self.assertAlmostEqual(result.weighted_average, 16.8, places=2)
        self.assertEqual(result.extra_points_applied, 1)
        self.assertAlmostEqual(result.final_grade, 17.8, places=2)
        self.assertTrue(result.attendance_satisfied)
        self.assertTrue(result.extra_policy_approved)

    def test_skips_extra_points_without_attendance(self):
        result = make_calculator(2).calculate(make_request(attendance=False, approvals=[True, True]))
        self.assertEqual(result.extra_points_applied, 0)
        self.assertAlmostEqual(result.final_grade, 16.8, places=2)
        self.assertFalse(result.attendance_satisfied)
        self.assertTrue(result.extra_policy_approved)

    def test_skips_extra_points_when_teachers_disagree(self):
        result = make_calculator(2).calculate(make_request(approvals=[True, False]))
        self.assertEqual(result.extra_points_applied, 0)
        self.assertAlmostEqual(result.final_grade, 16.8, places=2)
        self.assertFalse(result.extra_policy_approved)

    def test_caps_final_grade(self):
        evaluations = [
            Evaluation(name="Exam", score=19, weight=50),
            Evaluation(name="Project", score=20, weight=50),
        ]
        result = make_calculator(5, 18).calculate(make_request(evaluations=evaluations))
        self.assertEqual(result.weighted_average, 19.5)
        self.assertEqual(result.extra_points_applied, 5)
        self.assertEqual(result.final_grade, 18)

    def test_weighted_average_is_weighted_sum_over_100(self):
        evaluations = [
            Evaluation(name="Quiz", score=12.5, weight=25),
            Evaluation(name="Lab", score=14, weight=25),
            Evaluation(name="Final", score=17.25, weight=50),
        ]
        result = make_calculator(0).calculate(make_request(evaluations=evaluations))
        self.assertEqual(result.weighted_average, 15.25)
        self.assertEqual(result.final_grade, 15.25)

    def test_weighted_average_is_rounded(self):
        evaluations = [
            Evaluation(name="A", score=13, weight=33.33),
            Evaluation(name="B", score=14, weight=33.33),
            Evaluation(name="C", score=17, weight=33.34),
        ]
        result = make_calculator(0).calculate(make_request(evaluations=evaluations))
        # (433.29 + 466.62 + 566.78) / 100 = 14.6669
        self.assertEqual(result.weighted_average, 14.67)

    def test_rejects_empty_evaluations(self):
        with self.assertRaises(ValidationError):
            make_calculator().calculate(make_request(evaluations=[]))

    def test_rejects_more_than_ten_evaluations(self):
        evaluations = [Evaluation(name=f"Eval {i + 1}", score=12, weight=100 / 11) for i in range(11)]
        with self.assertRaises(ValidationError) as ctx:
            make_calculator().calculate(make_request(evaluations=evaluations))
        self.assertEqual(ctx.exception.message, "The maximum number of evaluations is 10.")

    def test_accepts_ten_evaluations(self):
        evaluations = [Evaluation(name=f"Eval {i + 1}", score=10, weight=10) for i in range(10)]
        result = make_calculator().calculate(make_request(evaluations=evaluations))
        self.assertEqual(result.weighted_average, 10)

    def test_rejects_weights_not_summing_100(self):
        evaluations = [
            Evaluation(name="Eval 1", score=10, weight=30),
            Evaluation(name="Eval 2", score=10, weight=30),
        ]
        with self.assertRaises(ValidationError) as ctx:
            make_calculator().calculate(make_request(evaluations=evaluations))
        self.assertEqual(ctx.exception.message, "The weights must add up to exactly 100.")

    def test_rejects_weights_off_by_one_hundredth(self):
        evaluations = [
            Evaluation(name="Eval 1", score=10, weight=50),
            Evaluation(name="Eval 2", score=10, weight=50.01),
        ]
        with self.assertRaises(ValidationError):
            make_calculator().calculate(make_request(evaluations=evaluations))

    def test_rejects_empty_or_oversized_approvals(self):
        for approvals in ([], [True] * 51):
            with self.subTest(count=len(approvals)):
                with self.assertRaises(ValidationError):
                    make_calculator().calculate(make_request(approvals=approvals))

    def test_rejects_non_boolean_attendance(self):
        with self.assertRaises(ValidationError):
            make_calculator().calculate(make_request(attendance="yes"))

    def test_result_as_dict(self):
        result = make_calculator(1).calculate(make_request())
        self.assertIsInstance(result, GradeCalculationResult)
        self.assertEqual(result.as_dict(), {
            "weighted_average": 16.8,
            "extra_points_applied": 1,
            "final_grade": 17.8,
            "attendance_satisfied": True,
            "extra_policy_approved": True,
        })


class RemainingWeightTests(unittest.TestCase):
    def test_remaining_weight(self):
        self.assertEqual(remaining_weight([]), 100)
        self.assertEqual(remaining_weight(BASE_EVALUATIONS[:1]), 60)
        self.assertEqual(remaining_weight(BASE_EVALUATIONS), 0)

    def test_remaining_weight_never_negative(self):
        evaluations = [Evaluation(name="A", score=10, weight=80), Evaluation(name="B", score=10, weight=80)]
        self.assertEqual(remaining_weight(evaluations), 0)


if __name__ == "__main__":
    unittest.main()
