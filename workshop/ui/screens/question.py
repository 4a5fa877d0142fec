"""Screen that asks a single question."""

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, OptionList, SelectionList, Static

from ...challenges.types import PromptResult, Question, QuestionType
from ..widgets.question_card import QuestionCard

SKIP_KEY = "ctrl+s"


class QuestionScreen(Screen[PromptResult]):
    """Prompt for one answer; ctrl+s skips the question."""

    CSS = """
    #answer-area {
        height: auto;
        margin: 1 0;
    }

    #answer-area OptionList, #answer-area SelectionList {
        height: auto;
        max-height: 16;
    }

    #answer-area Button {
        margin-top: 1;
    }

    .hint {
        color: $text-muted;
        text-style: italic;
    }
    """

    BINDINGS = [
        Binding(SKIP_KEY, "skip", "Skip question", priority=True),
    ]

    def __init__(self, question: Question, feedback: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.question = question
        self.feedback = feedback
        self._resolved = False

    def compose(self) -> ComposeResult:
        """Compose the question screen."""
        with Container(id="main-content"):
            yield QuestionCard(self.question, self.feedback)

            with Container(id="answer-area"):
                qtype = self.question.type
                if qtype == QuestionType.LIST.value:
                    yield OptionList(*[str(c) for c in self.question.choices], id="answer-list")
                elif qtype == QuestionType.CHECKBOX.value:
                    yield SelectionList[int](
                        *[(str(c), i) for i, c in enumerate(self.question.choices)],
                        id="answer-checkbox",
                    )
                    yield Button("Submit", id="btn-submit", variant="primary")
                else:
                    default = self.question.default
                    yield Input(
                        value="" if default is None else str(default),
                        placeholder="Your answer",
                        id="answer-input",
                    )

            yield Static("Press ctrl+s to skip this question", classes="hint")
        yield Footer()

    def _resolve(self, result: PromptResult) -> None:
        """Dismiss with the first outcome; later ones are ignored."""
        if self._resolved:
            return
        self._resolved = True
        self.dismiss(result)

    def action_skip(self) -> None:
        """Skip the question without grading it."""
        self._resolve(PromptResult.skip())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Submit a typed answer."""
        event.stop()
        self._resolve(PromptResult.answered(event.value))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Submit the picked choice of a list question."""
        event.stop()
        if isinstance(event.option_list, SelectionList):
            return
        self._resolve(PromptResult.answered(self.question.choices[event.option_index]))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Submit the ticked choices of a checkbox question."""
        event.stop()
        if event.button.id == "btn-submit":
            selected = self.query_one("#answer-checkbox", SelectionList).selected
            answer = [self.question.choices[i] for i in sorted(selected)]
            self._resolve(PromptResult.answered(answer))
