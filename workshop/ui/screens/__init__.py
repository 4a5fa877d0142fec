"""UI Screens."""

from .question import SKIP_KEY, QuestionScreen

__all__ = ["QuestionScreen", "SKIP_KEY"]
