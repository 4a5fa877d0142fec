"""Widget for displaying a question's text."""

from typing import Optional

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Label, Static

from ...challenges.types import Question


class QuestionCard(Widget):
    """A card showing the question name, its message and any feedback."""

    DEFAULT_CSS = """
    QuestionCard {
        height: auto;
        margin: 1 0;
        padding: 1 2;
        border: solid $primary;
        background: $surface-darken-1;
    }

    QuestionCard .question-name {
        color: $success;
        text-style: bold;
        margin-bottom: 1;
    }

    QuestionCard .question-text {
        color: $text;
    }

    QuestionCard .question-feedback {
        color: $error;
        text-style: bold;
        margin-top: 1;
    }
    """

    def __init__(self, question: Question, feedback: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.question = question
        self.feedback = feedback

    def compose(self) -> ComposeResult:
        """Compose the card."""
        yield Label(self.question.identity, classes="question-name", markup=False)
        yield Static(self.question.prompt_text, classes="question-text", markup=False)
        if self.feedback:
            yield Static(self.feedback, id="feedback", classes="question-feedback", markup=False)
