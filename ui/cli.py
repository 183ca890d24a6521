"""Command Line Interface (CLI) for user interaction."""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich.panel import Panel

import config
from core.evaluation import Evaluation
from core.grade_calculator import GradeCalculationResult, remaining_weight
from utils.logger import get_logger
from utils.error_handler import UserCancelledError, ValidationError

logger = get_logger()
console = Console()

PROMPT_PREFIX = "👉 "

YES_ANSWERS = frozenset({"y", "yes", "s", "si", "sí"})
NO_ANSWERS = frozenset({"n", "no"})

def display_welcome():
    """Displays a welcome message."""
    console.print(Panel(
        "[bold green]=== Grade Calculator ===[/bold green]",
        title="Welcome",
        border_style="blue"
    ))
    console.print("Computes a final grade from weighted evaluations, attendance and extra points.")
    console.rule()

def display_farewell():
    """Displays a farewell message."""
    console.rule()
    console.print("[bold cyan]👋 Done. Exiting.[/bold cyan]")

def display_error(message: str):
    """Displays an error message in a standard format."""
    console.print(Panel(f"[bold red]Error:[/bold red] {message}", title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")

def display_step(step_number: int, description: str):
    """Displays the current step in the process."""
    console.print(f"\n[bold blue]Step {step_number}:[/bold blue] {description}")
    console.rule()

# --- Raw input parsing ---

def parse_number(raw: str, minimum: float, maximum: float) -> float:
    """Parses a number typed by the user and checks it lies in [minimum, maximum].

    Raises:
        ValidationError: If the text is not a finite number inside the range.
    """
    try:
        value = float(raw.strip())
    except ValueError:
        value = None
    # NaN fails both comparisons; inf fails one of them
    if value is None or not minimum <= value <= maximum:
        raise ValidationError(f"Enter a numeric value between {minimum} and {maximum}.")
    return value

def parse_count(raw: str, minimum: int, maximum: int) -> int:
    """Like parse_number, but only whole numbers are accepted."""
    value = parse_number(raw, minimum, maximum)
    if not value.is_integer():
        raise ValidationError(f"Enter a whole number between {minimum} and {maximum}.")
    return int(value)

def parse_yes_no(raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in YES_ANSWERS:
        return True
    if normalized in NO_ANSWERS:
        return False
    raise ValidationError('Answer with "y" or "n".')

# --- Prompts ---

def _ask(message: str) -> str:
    try:
        return Prompt.ask(message)
    except (KeyboardInterrupt, EOFError) as e:
        raise UserCancelledError("Input aborted by the user.") from e

def prompt_student_code() -> str:
    student_code = _ask(f"{PROMPT_PREFIX}Student code")
    if not student_code.strip():
        raise ValidationError("The student code is required.", field="student_code")
    return student_code.strip()

def prompt_number(message: str, minimum: float, maximum: float) -> float:
    return parse_number(_ask(message), minimum, maximum)

def prompt_count(message: str, minimum: int, maximum: int) -> int:
    return parse_count(_ask(message), minimum, maximum)

def prompt_yes_no(message: str) -> bool:
    return parse_yes_no(_ask(f"{message} (y/n)"))

def collect_evaluations() -> List[Evaluation]:
    """Asks how many evaluations there are, then name, score and weight of each.

    Returns:
        The evaluations in the order they were entered.

    Raises:
        ValidationError: On the first invalid answer.
    """
    count = prompt_count(
        f"{PROMPT_PREFIX}Number of evaluations (1-{config.MAX_EVALUATIONS})", 1, config.MAX_EVALUATIONS
    )
    evaluations: List[Evaluation] = []
    for i in range(count):
        console.print(f"\n[bold]Evaluation {i + 1}[/bold]")
        name = _ask(f"{PROMPT_PREFIX}Name")
        score = prompt_number(
            f"{PROMPT_PREFIX}Score ({config.SCORE_MIN}-{config.SCORE_MAX})", config.SCORE_MIN, config.SCORE_MAX
        )
        weight = prompt_number(
            f"{PROMPT_PREFIX}Weight percentage (remaining {remaining_weight(evaluations):.2f}%)",
            config.WEIGHT_MIN,
            config.WEIGHT_MAX,
        )
        evaluations.append(Evaluation(name=name, score=score, weight=weight))
    logger.info(f"Collected {len(evaluations)} evaluation(s).")
    return evaluations

def collect_teacher_approvals() -> List[bool]:
    """Asks, year by year, whether that year's teachers approved extra points."""
    count = prompt_count(
        f"{PROMPT_PREFIX}Number of yearly teacher policies (1-{config.MAX_TEACHER_POLICIES})",
        1,
        config.MAX_TEACHER_POLICIES,
    )
    return [
        prompt_yes_no(f"{PROMPT_PREFIX}Did the teachers of year {i + 1} approve extra points?")
        for i in range(count)
    ]

def format_yes_no(value: bool) -> str:
    return "Yes" if value else "No"

def display_result(student_code: str, result: GradeCalculationResult):
    """Displays the calculation result as a table.

    Args:
        student_code: Code of the student the grade belongs to.
        result: Output of GradeCalculator.calculate.
    """
    table = Table(title="Result", show_header=True, header_style="bold magenta")
    table.add_column("Item", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Student", student_code)
    table.add_row("Weighted average", f"{result.weighted_average:g}")
    table.add_row("Minimum attendance reached", format_yes_no(result.attendance_satisfied))
    table.add_row("Teachers approved extra points", format_yes_no(result.extra_policy_approved))
    table.add_row("Extra points applied", f"{result.extra_points_applied:g}")
    table.add_row("Final grade", f"[bold]{result.final_grade:g}[/bold]")

    console.print(table)
