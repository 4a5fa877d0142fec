"""Pydantic models for workshop configuration."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_PATTERN = "**/q.yaml"
DEFAULT_STORE_DIRNAME = ".workshop"


class WorkshopConfig(BaseModel):
    """Settings for one workshop run."""

    root_dir: Path = Field(
        default_factory=Path.cwd,
        description="Working directory; question identities are relative to it",
    )
    challenges_dir: Optional[Path] = Field(
        default=None, description="Where to look for challenge files (defaults to root_dir)"
    )
    pattern: str = Field(default=DEFAULT_PATTERN, description="Glob for challenge files")
    store_dirname: str = Field(
        default=DEFAULT_STORE_DIRNAME, description="Progress store directory name"
    )
    log_level: str = Field(default="WARNING")

    @property
    def search_dir(self) -> Path:
        """Directory the catalog is built from."""
        return self.challenges_dir or self.root_dir

    @property
    def store_path(self) -> Path:
        """Location of the progress store directory."""
        return self.root_dir / self.store_dirname
