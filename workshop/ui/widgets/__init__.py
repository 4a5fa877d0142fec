"""UI Widgets."""

from .question_card import QuestionCard

__all__ = ["QuestionCard"]
