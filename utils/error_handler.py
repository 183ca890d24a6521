"""Custom exception classes for the application."""

class GradeCalculatorError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(GradeCalculatorError):
    """Error related to configuration loading or values."""
    pass

class ValidationError(GradeCalculatorError):
    """A grading rule or an input constraint was violated."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            return f"{base} (Field: {self.field})"
        return base

class UserCancelledError(GradeCalculatorError):
    """Error raised when the user cancels an operation."""
    pass
