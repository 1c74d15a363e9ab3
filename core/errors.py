# core/errors.py
from typing import List, Optional


# --- Custom Exceptions ---
class DueProcessAIError(Exception):
    """Base class for every failure the generation pipeline can report."""
    pass


class MissingAPIKeyError(DueProcessAIError):
    """Raised when required API keys are missing"""
    pass


class ValidationError(DueProcessAIError):
    """
    Raised when caller input violates a task's input schema.
    Carries every violation, one "<field>: <message>" string each.
    """

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("Invalid input: " + ", ".join(self.violations))


class UnknownTaskError(DueProcessAIError):
    """Raised when a task name is not registered"""

    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(f"Unknown task: {task_name!r}")


class TransportError(DueProcessAIError):
    """Raised for model host failures (network, rate limit, auth, timeout)"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "The AI service could not be reached. Please try again in a few moments."
        )


class SchemaViolationError(DueProcessAIError):
    """Raised when model output cannot be coerced into the output schema"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "The AI returned a response in an unexpected format. Please try rephrasing your input and submit again."
        )


class GenerationFailedError(DueProcessAIError):
    """Raised when the model produced nothing and the task defines no fallback"""
    pass
