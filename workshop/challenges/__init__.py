"""Challenge catalog, validation and session engine."""

from .types import PromptResult, Question, QuestionType
from .catalog import CatalogBuilder
from .validators import WRONG_ANSWER, ValidationOutcome, ValidatorResolver
from .engine import SessionResult, SessionRunner, SessionState

__all__ = [
    "CatalogBuilder",
    "PromptResult",
    "Question",
    "QuestionType",
    "SessionResult",
    "SessionRunner",
    "SessionState",
    "ValidationOutcome",
    "ValidatorResolver",
    "WRONG_ANSWER",
]
