"""Build a WorkshopConfig from the environment and explicit overrides."""

import os
from pathlib import Path
from typing import Optional

from .models import DEFAULT_PATTERN, DEFAULT_STORE_DIRNAME, WorkshopConfig


def _resolve(path: Optional[str], base: Path) -> Optional[Path]:
    """Resolve a possibly relative path against base."""
    if not path:
        return None
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = base / candidate
    return candidate.resolve()


def load_config(
    root_dir: Optional[Path] = None,
    challenges_dir: Optional[str] = None,
    pattern: Optional[str] = None,
    store_dirname: Optional[str] = None,
    log_level: Optional[str] = None,
) -> WorkshopConfig:
    """Load workshop settings.

    Explicit arguments win over ``WORKSHOP_*`` environment variables, which
    win over the model defaults.

    Args:
        root_dir: Working directory. Defaults to the process cwd.
        challenges_dir: Search root for challenge files.
        pattern: Glob used to discover challenge files.
        store_dirname: Name of the progress store directory.
        log_level: Logging level name.

    Returns:
        Resolved WorkshopConfig
    """
    root = (root_dir or Path.cwd()).resolve()

    return WorkshopConfig(
        root_dir=root,
        challenges_dir=_resolve(
            challenges_dir or os.getenv("WORKSHOP_CHALLENGES_DIR"), root
        ),
        pattern=pattern or os.getenv("WORKSHOP_PATTERN") or DEFAULT_PATTERN,
        store_dirname=(
            store_dirname or os.getenv("WORKSHOP_STORE_DIR") or DEFAULT_STORE_DIRNAME
        ),
        log_level=(log_level or os.getenv("WORKSHOP_LOG_LEVEL", "WARNING")).upper(),
    )
