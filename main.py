"""Main execution script for the interactive grade calculator."""

import sys

from dotenv import load_dotenv

# Environment variables must be in place before config is imported
load_dotenv()

import config
from utils.logger import setup_logger
from utils.error_handler import ConfigError, UserCancelledError, ValidationError
from core.attendance_policy import AttendancePolicy
from core.extra_points_policy import ExtraPointsPolicy
from core.grade_calculator import GradeCalculator, GradeCalculationRequest, ensure_weights_total
import ui.cli as cli

# Initialize logger as early as possible after config is loaded
logger = setup_logger()

def main() -> int:
    """Runs one interactive grading session.

    Returns:
        The process exit code: 0 on success, 1 on any error or cancellation.
    """
    logger.info("Starting grade calculator session.")
    cli.display_welcome()

    try:
        cap = config.cap_grade_at()

        # --- Step 1: Student ---
        cli.display_step(1, "Student")
        student_code = cli.prompt_student_code()

        # --- Step 2: Evaluations ---
        cli.display_step(2, "Evaluations")
        evaluations = cli.collect_evaluations()
        ensure_weights_total(evaluations)

        # --- Step 3: Attendance and extra points ---
        cli.display_step(3, "Attendance and Extra Points")
        has_reached_min_classes = cli.prompt_yes_no(f"{cli.PROMPT_PREFIX}Was minimum attendance reached?")
        all_years_teachers = cli.collect_teacher_approvals()
        extra_points = cli.prompt_number(
            f"{cli.PROMPT_PREFIX}Extra points value when applicable (0-{config.MAX_EXTRA_POINTS})",
            0,
            config.MAX_EXTRA_POINTS,
        )

        calculator = GradeCalculator(
            AttendancePolicy(),
            ExtraPointsPolicy(max_points=extra_points, cap_grade_at=cap),
        )
        result = calculator.calculate(GradeCalculationRequest(
            evaluations=evaluations,
            has_reached_min_classes=has_reached_min_classes,
            all_years_teachers=all_years_teachers,
        ))
        logger.info(f"Result for student {student_code}: {result.as_dict()}")

        # --- Step 4: Result ---
        cli.display_step(4, "Result")
        cli.display_result(student_code, result)
        return 0

    except ConfigError as e:
        logger.critical(f"Configuration error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Setup Error: {e}")
    except ValidationError as e:
        logger.warning(f"Validation error: {e}", exc_info=config.DEBUG)
        cli.display_error(f"Validation error: {e.message}")
    except UserCancelledError as e:
        logger.info(f"Operation cancelled by user: {e}")
        cli.display_warning(f"Operation cancelled: {e}")
    except (KeyboardInterrupt, EOFError):
        logger.info("Operation interrupted by user.")
        cli.display_warning("Operation interrupted.")
    except Exception as e:
        # Catch-all for unexpected errors
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        cli.display_error(f"An unexpected error occurred: {e}. Check logs for details.")
    finally:
        cli.display_farewell()
    return 1

def run():
    """Console script entry point."""
    sys.exit(main())

if __name__ == "__main__":
    run()
