"""Read challenge documents from disk."""

from pathlib import Path
from typing import Any

import yaml

from ..errors import DocumentError


def load_document(path: Path) -> Any:
    """Parse a YAML challenge document.

    Returns:
        Whatever the document holds: a mapping, a list, a scalar or None
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise DocumentError(path, f"cannot read file ({e.strerror or e})") from e
    except yaml.YAMLError as e:
        raise DocumentError(path, f"invalid YAML ({e})") from e


def read_text(path: Path) -> str:
    """Read a supplementary message file verbatim."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(path, f"cannot read file ({e.strerror or e})") from e
