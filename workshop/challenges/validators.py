"""Answer validation for questions."""

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from .types import Question

WRONG_ANSWER = "Try again :("

ValidatorReturn = Union[bool, str, None]
Validator = Callable[[Any, Question], Union[ValidatorReturn, Awaitable[ValidatorReturn]]]


class ValidationOutcome:
    """Result of checking one submitted answer."""

    def __init__(self, accepted: bool, message: Optional[str] = None):
        self.accepted = accepted
        self.message = message

    @classmethod
    def accept(cls) -> "ValidationOutcome":
        return cls(True)

    @classmethod
    def reject(cls, message: str = WRONG_ANSWER) -> "ValidationOutcome":
        return cls(False, message)

    def __repr__(self) -> str:
        if self.accepted:
            return "ValidationOutcome(accepted)"
        return f"ValidationOutcome(rejected: {self.message!r})"


def flatten(value: Any) -> Any:
    """Join a sequence into one string; scalars are returned as-is."""
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else str(item) for item in value)
    return value


def default_validator(answer: Any, question: Question) -> bool:
    """Strict equality between the submitted and expected answers.

    Both sides are joined with "," only when the submission is a sequence.
    """
    if isinstance(answer, (list, tuple)):
        return flatten(answer) == flatten(question.expected_answer)
    return answer == question.expected_answer


class ValidatorResolver:
    """Picks the validator for a question type."""

    def __init__(self, validators: Optional[Mapping[str, Validator]] = None):
        """Initialize the resolver.

        Args:
            validators: Custom validators keyed by question type. These
                replace the default strict comparison for their type.
        """
        self.validators: dict[str, Validator] = dict(validators or {})

    @property
    def custom_types(self) -> frozenset[str]:
        """Question types with a registered custom validator."""
        return frozenset(self.validators)

    def resolve(self, question_type: str) -> Validator:
        """Get the validator for a question type."""
        return self.validators.get(question_type, default_validator)

    async def validate(self, question: Question, answer: Any) -> ValidationOutcome:
        """Judge a submitted answer.

        Validators may return True (accepted), False (rejected with the
        standard message) or a string (rejected with that message), either
        directly or from a coroutine.
        """
        result = self.resolve(question.type)(answer, question)
        if inspect.isawaitable(result):
            result = await result

        if result is True:
            return ValidationOutcome.accept()
        if isinstance(result, str) and result:
            return ValidationOutcome.reject(result)
        return ValidationOutcome.reject()
