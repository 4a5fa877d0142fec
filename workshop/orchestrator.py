"""Compose store, catalog and session into one workshop run."""

import logging
from typing import Mapping, Optional

from .challenges.catalog import CatalogBuilder
from .challenges.engine import EchoFn, Prompter, SessionResult, SessionRunner, SessionState
from .challenges.types import Question
from .challenges.validators import Validator, ValidatorResolver
from .config.models import WorkshopConfig
from .errors import StoreOpenError
from .storage.database import ProgressStore
from .storage.progress import ProgressTracker

logger = logging.getLogger(__name__)

BOOT_FAILURE = "Failed to boot workshop."


def build_catalog(config: WorkshopConfig) -> list[Question]:
    """Build the question catalog described by a config."""
    builder = CatalogBuilder(config.root_dir, config.search_dir, config.pattern)
    return builder.build()


async def run_workshop(
    config: WorkshopConfig,
    prompter: Prompter,
    validators: Optional[Mapping[str, Validator]] = None,
    echo: EchoFn = print,
) -> SessionResult:
    """Run a full workshop session.

    Opens the progress store, builds the catalog, runs every question not yet
    passed and closes the store again on every path out.

    Args:
        config: Workshop settings
        prompter: Terminal collaborator that asks questions
        validators: Custom validators keyed by question type
        echo: Output for status lines

    Returns:
        SessionResult; a store that cannot be opened yields exit code 1
    """
    store = ProgressStore(config.store_path)
    try:
        await store.open()
    except StoreOpenError as e:
        logger.error("%s", e)
        return SessionResult(SessionState.LOADING, BOOT_FAILURE, exit_code=1)

    try:
        passed = await store.passed_identities()
        questions = build_catalog(config)
        runner = SessionRunner(
            store,
            prompter,
            resolver=ValidatorResolver(validators),
            echo=echo,
            store_dirname=config.store_dirname,
        )
        return await runner.run(questions, passed)
    finally:
        await store.close()


async def workshop_status(config: WorkshopConfig) -> list[str]:
    """Describe progress over the catalog without prompting.

    Raises:
        StoreOpenError: if the progress store cannot be opened
    """
    async with ProgressStore(config.store_path) as store:
        tracker = ProgressTracker(store)
        summary = await tracker.get_summary(build_catalog(config))
    return tracker.format_summary(summary)
