"""Storage module for persistence."""

from .database import ProgressStore
from .progress import ProgressTracker

__all__ = ["ProgressStore", "ProgressTracker"]
