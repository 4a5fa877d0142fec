"""Entry point for workshop."""

import argparse
import asyncio
import logging
import sys
from typing import Mapping, Optional

from textual.logging import TextualHandler

from .challenges.validators import Validator
from .config import WorkshopConfig, load_config
from .errors import StoreOpenError
from .orchestrator import BOOT_FAILURE, workshop_status
from .ui.app import WorkshopApp


def configure_logging(level: str) -> None:
    """Route log records through Textual so they never garble the screen."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[TextualHandler()],
    )


def exit_code_for(app: WorkshopApp) -> int:
    """Exit code for a finished app.

    The session result decides when there is one. Otherwise Textual's
    return code applies: 0 after a quit, 1 when the session crashed.
    """
    result = app.return_value
    if result is None:
        return app.return_code or 0
    return result.exit_code


def run_app(
    config: Optional[WorkshopConfig] = None,
    validators: Optional[Mapping[str, Validator]] = None,
) -> int:
    """Run the interactive workshop.

    Args:
        config: Workshop settings (loaded from the environment if omitted)
        validators: Custom validators keyed by question type

    Returns:
        Process exit code
    """
    config = config or load_config()
    app = WorkshopApp(config, validators=validators)
    result = app.run()

    for line in app.transcript:
        print(line)

    if result is not None:
        print(result.message)
    return exit_code_for(app)


def show_status(config: WorkshopConfig) -> int:
    """Print pass marks for every catalog question."""
    try:
        lines = asyncio.run(workshop_status(config))
    except StoreOpenError as e:
        logging.getLogger(__name__).error("%s", e)
        print(BOOT_FAILURE)
        return 1

    for line in lines:
        print(line)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the workshop CLI."""
    parser = argparse.ArgumentParser(
        prog="workshop", description="Interactive file-driven challenge runner"
    )
    parser.add_argument("command", nargs="?", default="run", choices=["run", "status"])
    parser.add_argument("--challenges", help="Directory to search for challenge files")
    parser.add_argument("--pattern", help="Glob matching challenge files (default **/q.yaml)")
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    args = parser.parse_args(argv)

    config = load_config(
        challenges_dir=args.challenges,
        pattern=args.pattern,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    if args.command == "status":
        return show_status(config)
    return run_app(config)


if __name__ == "__main__":
    sys.exit(main())
