"""Challenge session engine."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Protocol

from ..config.models import DEFAULT_STORE_DIRNAME
from .types import BUILTIN_TYPES, PromptResult, Question
from .validators import ValidatorResolver

if TYPE_CHECKING:
    from ..storage.database import ProgressStore

logger = logging.getLogger(__name__)

EchoFn = Callable[[str], None]

ALL_CLEARED = "All questions are cleared, awesome!"
NO_MORE_CHALLENGES = (
    "No more challenges in this workshop, bye.\n"
    "To restart the workshop, simply delete {store} directory."
)


class SessionState(str, Enum):
    """States of a workshop session."""

    LOADING = "loading"
    FILTERING = "filtering"
    EMPTY = "empty"
    READY = "ready"
    PROMPTING = "prompting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    SKIPPED = "skipped"
    ADVANCING = "advancing"
    COMPLETE = "complete"


class Prompter(Protocol):
    """Terminal collaborator that asks one question at a time."""

    async def ask(self, question: Question, feedback: Optional[str] = None) -> PromptResult:
        """Block until the user submits an answer or skips."""
        ...


class SessionResult:
    """Final outcome of a session."""

    def __init__(
        self,
        state: SessionState,
        message: str,
        exit_code: int = 0,
        passed: Optional[list[str]] = None,
        skipped: Optional[list[str]] = None,
    ):
        self.state = state
        self.message = message
        self.exit_code = exit_code
        self.passed = passed or []
        self.skipped = skipped or []


def filter_questions(
    questions: Iterable[Question],
    passed: set[str],
    recognized_types: Iterable[str] = BUILTIN_TYPES,
) -> list[Question]:
    """Drop passed questions and questions that cannot be run.

    Catalog order is preserved.
    """
    recognized = set(recognized_types)
    runnable = []
    for question in questions:
        if question.identity in passed:
            continue
        if not question.prompt_text:
            logger.warning("Dropping question '%s' with an empty prompt", question.identity)
            continue
        if question.type not in recognized:
            logger.warning(
                "Dropping question '%s' with unsupported type '%s'",
                question.identity,
                question.type,
            )
            continue
        runnable.append(question)
    return runnable


class SessionRunner:
    """Runs questions one at a time against a prompter."""

    def __init__(
        self,
        store: "ProgressStore",
        prompter: Prompter,
        resolver: Optional[ValidatorResolver] = None,
        echo: EchoFn = print,
        store_dirname: str = DEFAULT_STORE_DIRNAME,
    ):
        """Initialize the runner.

        Args:
            store: Open progress store
            prompter: Terminal collaborator used to ask questions
            resolver: Validator lookup (defaults to strict comparison only)
            echo: Output for status lines such as skip notices
            store_dirname: Store directory named in the restart hint
        """
        self.store = store
        self.prompter = prompter
        self.resolver = resolver or ValidatorResolver()
        self.echo = echo
        self.store_dirname = store_dirname
        self.state = SessionState.LOADING
        self.history: list[SessionState] = [SessionState.LOADING]
        self.current: Optional[Question] = None

    def _transition(self, state: SessionState) -> None:
        logger.debug(
            "Session %s -> %s%s",
            self.state.value,
            state.value,
            f" ({self.current.identity})" if self.current else "",
        )
        self.state = state
        self.history.append(state)

    @property
    def recognized_types(self) -> frozenset[str]:
        """Question types this session can run."""
        return BUILTIN_TYPES | self.resolver.custom_types

    async def run(
        self,
        questions: list[Question],
        passed: Optional[set[str]] = None,
    ) -> SessionResult:
        """Run every unresolved question in catalog order.

        Args:
            questions: Normalized catalog
            passed: Identities already passed; read from the store if omitted

        Returns:
            SessionResult describing how the session ended
        """
        if passed is None:
            passed = await self.store.passed_identities()

        self._transition(SessionState.FILTERING)
        runnable = filter_questions(questions, passed, self.recognized_types)

        if not runnable:
            self._transition(SessionState.EMPTY)
            return SessionResult(
                SessionState.EMPTY,
                NO_MORE_CHALLENGES.format(store=self.store_dirname),
            )

        self._transition(SessionState.READY)
        passed_now: list[str] = []
        skipped: list[str] = []

        for question in runnable:
            self.current = question
            if await self._run_question(question):
                passed_now.append(question.identity)
            else:
                skipped.append(question.identity)
            self._transition(SessionState.ADVANCING)

        self.current = None
        self._transition(SessionState.COMPLETE)
        return SessionResult(
            SessionState.COMPLETE,
            ALL_CLEARED,
            passed=passed_now,
            skipped=skipped,
        )

    async def _run_question(self, question: Question) -> bool:
        """Prompt until the question is accepted (True) or skipped (False)."""
        feedback: Optional[str] = None

        while True:
            self._transition(SessionState.PROMPTING)
            result = await self.prompter.ask(question, feedback)

            if result.skipped:
                self._transition(SessionState.SKIPPED)
                self.echo(f"Skipped... {question.identity}")
                logger.info("Skipped '%s'", question.identity)
                return False

            outcome = await self.resolver.validate(question, result.value)
            if outcome.accepted:
                self._transition(SessionState.ACCEPTED)
                await self.store.mark_passed(question.identity)
                logger.info("Passed '%s'", question.identity)
                return True

            self._transition(SessionState.REJECTED)
            feedback = outcome.message
