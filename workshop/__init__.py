"""Interactive, file-driven challenge runner."""

from .challenges import (
    CatalogBuilder,
    PromptResult,
    Question,
    QuestionType,
    SessionResult,
    SessionRunner,
    SessionState,
    ValidationOutcome,
    ValidatorResolver,
    WRONG_ANSWER,
)
from .config import WorkshopConfig, load_config
from .errors import DocumentError, ResolutionError, StoreOpenError, WorkshopError
from .orchestrator import run_workshop
from .storage import ProgressStore

__version__ = "0.1.0"

__all__ = [
    "CatalogBuilder",
    "DocumentError",
    "ProgressStore",
    "PromptResult",
    "Question",
    "QuestionType",
    "ResolutionError",
    "SessionResult",
    "SessionRunner",
    "SessionState",
    "StoreOpenError",
    "ValidationOutcome",
    "ValidatorResolver",
    "WRONG_ANSWER",
    "WorkshopConfig",
    "WorkshopError",
    "load_config",
    "run_workshop",
]
