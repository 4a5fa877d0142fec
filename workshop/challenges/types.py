"""Question and prompt type definitions."""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    """Built-in question types."""

    INPUT = "input"
    LIST = "list"
    CHECKBOX = "checkbox"
    FILE = "file"


BUILTIN_TYPES = frozenset(t.value for t in QuestionType)


class Question(BaseModel):
    """A single challenge shown to the user."""

    identity: str = Field(description="Durable key used for pass tracking")
    type: str = Field(description="Question type tag (built-in or custom)")
    prompt_text: str = Field(description="Message shown to the user")
    choices: list[Any] = Field(default_factory=list)
    expected_answer: Any = Field(default=None)
    default: Optional[Any] = Field(default=None)
    source: list[str] = Field(default_factory=list)
    message_file: Optional[str] = Field(default=None)
    working_directory: Path = Field(description="Directory of the source file")
    base_group: str = Field(description="Source directory relative to the root")


class PromptResult:
    """Outcome of prompting one question: a submitted answer or a skip."""

    def __init__(self, skipped: bool, value: Any = None):
        self.skipped = skipped
        self.value = value

    @classmethod
    def answered(cls, value: Any) -> "PromptResult":
        return cls(skipped=False, value=value)

    @classmethod
    def skip(cls) -> "PromptResult":
        return cls(skipped=True)

    def __repr__(self) -> str:
        if self.skipped:
            return "PromptResult(skipped)"
        return f"PromptResult(value={self.value!r})"
