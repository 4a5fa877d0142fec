"""Workshop configuration."""

from .loader import load_config
from .models import DEFAULT_PATTERN, DEFAULT_STORE_DIRNAME, WorkshopConfig

__all__ = [
    "DEFAULT_PATTERN",
    "DEFAULT_STORE_DIRNAME",
    "WorkshopConfig",
    "load_config",
]
