"""A single graded assessment: name, score and weight."""

import math
from dataclasses import dataclass

import config
from core.rounding import round2
from utils.error_handler import ValidationError


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid score or weight
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Evaluation:
    """Immutable evaluation, validated and normalized when created.

    The name is stored trimmed; score and weight are rounded to 2 decimals.

    Raises:
        ValidationError: If the name is blank, the score falls outside
            [SCORE_MIN, SCORE_MAX] or the weight outside [WEIGHT_MIN, WEIGHT_MAX].
    """
    name: str
    score: float
    weight: float

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("The evaluation name is required.", field="name")

        if (not _is_number(self.score) or not math.isfinite(self.score)
                or not config.SCORE_MIN <= self.score <= config.SCORE_MAX):
            raise ValidationError(
                f"The score must be between {config.SCORE_MIN} and {config.SCORE_MAX}.", field="score"
            )

        if (not _is_number(self.weight) or not math.isfinite(self.weight)
                or not config.WEIGHT_MIN <= self.weight <= config.WEIGHT_MAX):
            raise ValidationError(
                f"The weight must be between {config.WEIGHT_MIN} and {config.WEIGHT_MAX}.", field="weight"
            )

        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "score", round2(self.score))
        object.__setattr__(self, "weight", round2(self.weight))
