from .scoring import evaluate, format_feedback, is_solved, PRESENT, ABSENT
from .validation import normalize_guess

__all__ = ["evaluate", "format_feedback", "is_solved", "normalize_guess", "PRESENT", "ABSENT"]
