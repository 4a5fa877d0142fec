from pathlib import Path
from typing import Optional

import pytest
import yaml

from workshop.challenges.types import PromptResult, Question
from workshop.config import WorkshopConfig


class ScriptedPrompter:
    """Prompter that replays canned outcomes and records what it was asked."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.asked: list[tuple[str, Optional[str]]] = []

    async def ask(self, question: Question, feedback: Optional[str] = None) -> PromptResult:
        self.asked.append((question.identity, feedback))
        if not self.outcomes:
            raise AssertionError(f"Unexpected prompt for {question.identity}")
        outcome = self.outcomes.pop(0)
        if callable(outcome):
            outcome = await outcome(question)
        if isinstance(outcome, PromptResult):
            return outcome
        return PromptResult.answered(outcome)


@pytest.fixture
def write_challenge(tmp_path):
    """Write a q.yaml under tmp_path/<relative_dir> and return its path."""

    def _write(relative_dir: str, content, filename: str = "q.yaml") -> Path:
        directory = tmp_path / relative_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config(tmp_path) -> WorkshopConfig:
    return WorkshopConfig(root_dir=tmp_path)


def make_question(identity: str, qtype: str = "input", answer=None, **fields) -> Question:
    return Question(
        identity=identity,
        type=qtype,
        prompt_text=fields.pop("prompt_text", f"Question {identity}?"),
        expected_answer=answer,
        working_directory=fields.pop("working_directory", Path("/tmp")),
        base_group=fields.pop("base_group", identity),
        **fields,
    )
