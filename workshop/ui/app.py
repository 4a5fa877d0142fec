"""Main Textual application."""

from typing import Mapping, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Log

from ..challenges.engine import SessionResult
from ..challenges.types import PromptResult, Question
from ..challenges.validators import Validator
from ..config.models import WorkshopConfig
from ..orchestrator import run_workshop
from .screens.question import QuestionScreen


class WorkshopApp(App[SessionResult]):
    """Interactive challenge runner."""

    TITLE = "workshop"
    SUB_TITLE = "Work through the challenges"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: auto;
        padding: 1 2;
    }

    #session-log {
        height: 1fr;
        border: solid $primary;
    }

    *:focus {
        border: solid $success;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: WorkshopConfig,
        validators: Optional[Mapping[str, Validator]] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.workshop_config = config
        self.validators = validators
        self.transcript: list[str] = []

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield Log(id="session-log")
        yield Footer()

    def on_mount(self) -> None:
        """Start the session once the app is up."""
        self.run_worker(self._run_session(), exclusive=True, name="session")

    async def _run_session(self) -> None:
        """Run the workshop and exit with its result."""
        result = await run_workshop(
            self.workshop_config,
            prompter=self,
            validators=self.validators,
            echo=self.echo,
        )
        self.exit(result)

    async def ask(self, question: Question, feedback: Optional[str] = None) -> PromptResult:
        """Show a question screen and wait for its outcome."""
        return await self.push_screen_wait(QuestionScreen(question, feedback))

    def echo(self, line: str) -> None:
        """Write a status line to the session log."""
        self.transcript.append(line)
        self.screen_stack[0].query_one("#session-log", Log).write_line(line)
