import contextlib

import pytest
from textual.widgets import Button, OptionList, SelectionList
from textual.worker import WorkerFailed

from workshop.challenges.engine import SessionState
from workshop.main import exit_code_for
from workshop.storage import ProgressStore
from workshop.ui.app import WorkshopApp
from workshop.ui.screens.question import QuestionScreen


async def _wait_for(pilot, condition, attempts: int = 100) -> None:
    for _ in range(attempts):
        if condition():
            return
        await pilot.pause(0.05)
    raise AssertionError("Timed out waiting for the app")


def _question_shown(app, identity: str):
    return lambda: isinstance(app.screen, QuestionScreen) and app.screen.question.identity == identity


@pytest.fixture
def one_question(write_challenge):
    write_challenge("intro", {"message": "Say hi", "type": "input", "answer": "hi"})


@pytest.mark.asyncio
async def test_answer_submitted_from_input(config, one_question):
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "intro"))
        await pilot.press("h", "i", "enter")
        await _wait_for(pilot, lambda: app.return_value is not None)

    assert app.return_value.state == SessionState.COMPLETE
    assert app.return_value.passed == ["intro"]


@pytest.mark.asyncio
async def test_wrong_answer_shows_feedback_then_skip(config, one_question):
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "intro"))
        await pilot.press("n", "o", "enter")
        await _wait_for(
            pilot,
            lambda: isinstance(app.screen, QuestionScreen) and app.screen.feedback is not None,
        )
        assert app.screen.feedback == "Try again :("
        await pilot.press("ctrl+s")
        await _wait_for(pilot, lambda: app.return_value is not None)

    assert app.return_value.skipped == ["intro"]
    assert app.transcript == ["Skipped... intro"]

    async with ProgressStore(config.store_path) as store:
        assert await store.passed_identities() == set()


@pytest.mark.asyncio
async def test_list_choice_submits_the_choice_value(config, write_challenge):
    write_challenge(
        "pick",
        {"message": "Pick twenty", "type": "list", "choices": [10, 20, 30], "answer": 2},
    )
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "pick"))
        options = app.screen.query_one("#answer-list", OptionList)
        options.focus()
        options.highlighted = 1
        await pilot.press("enter")
        await _wait_for(pilot, lambda: app.return_value is not None)

    assert app.return_value.passed == ["pick"]
    assert exit_code_for(app) == 0


@pytest.mark.asyncio
async def test_checkbox_submits_ticked_choices_in_choice_order(config, write_challenge):
    write_challenge(
        "tick",
        {"message": "Tick a and c", "type": "checkbox", "choices": ["a", "b", "c"], "answer": [1, 3]},
    )
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "tick"))
        selection = app.screen.query_one("#answer-checkbox", SelectionList)
        selection.select(2)
        selection.select(0)
        await pilot.pause()
        app.screen.query_one("#btn-submit", Button).press()
        await _wait_for(pilot, lambda: app.return_value is not None)

    assert app.return_value.passed == ["tick"]


@pytest.mark.asyncio
async def test_toggling_a_checkbox_does_not_submit(config, write_challenge):
    write_challenge(
        "tick",
        {"message": "Tick a", "type": "checkbox", "choices": ["a", "b"], "answer": [1]},
    )
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "tick"))
        screen = app.screen
        selection = screen.query_one("#answer-checkbox", SelectionList)
        selection.focus()
        selection.highlighted = 0
        await pilot.press("enter")
        await pilot.pause(0.2)

        assert app.screen is screen
        assert selection.selected == [0]
        assert app.return_value is None

        await pilot.press("ctrl+s")
        await _wait_for(pilot, lambda: app.return_value is not None)

    assert app.return_value.skipped == ["tick"]


@pytest.mark.asyncio
async def test_quit_before_the_session_ends_exits_cleanly(config, one_question):
    app = WorkshopApp(config)

    async with app.run_test() as pilot:
        await _wait_for(pilot, _question_shown(app, "intro"))
        await pilot.press("ctrl+q")
        await _wait_for(pilot, lambda: app.return_code is not None)

    assert app.return_value is None
    assert exit_code_for(app) == 0


@pytest.mark.asyncio
async def test_crashing_validator_exits_non_zero(config, one_question):
    def broken(answer, question):
        raise RuntimeError("test runner missing")

    app = WorkshopApp(config, validators={"input": broken})

    with contextlib.suppress(WorkerFailed):
        async with app.run_test() as pilot:
            await _wait_for(pilot, _question_shown(app, "intro"))
            await pilot.press("h", "i", "enter")
            await _wait_for(pilot, lambda: app.return_code is not None)

    assert app.return_value is None
    assert exit_code_for(app) == 1
