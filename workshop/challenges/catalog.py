"""Discover challenge files and normalize them into questions."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from ..config.models import DEFAULT_PATTERN
from ..errors import DocumentError, ResolutionError
from .documents import load_document, read_text
from .types import Question, QuestionType

logger = logging.getLogger(__name__)

DIVIDER = "\n" + "─" * 15 + "\n"


def base_group_for(path: Path, root_dir: Path) -> str:
    """Collapse the file's directory, relative to root_dir, into a group name."""
    relative = os.path.relpath(path.parent, root_dir)
    group = relative.replace(os.sep, "-")
    if os.altsep:
        group = group.replace(os.altsep, "-")
    return group


def resolve_index(value: Any, choices: list[Any], identity: str) -> Any:
    """Turn a 1-based choice index into the choice itself.

    Non-integer values are literal answers and pass through untouched.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return value
    if not 1 <= value <= len(choices):
        raise ResolutionError(identity, value, len(choices))
    return choices[value - 1]


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class CatalogBuilder:
    """Builds the ordered question catalog from a directory tree."""

    def __init__(
        self,
        root_dir: Path,
        search_dir: Optional[Path] = None,
        pattern: str = DEFAULT_PATTERN,
    ):
        """Initialize the builder.

        Args:
            root_dir: Directory identities are derived relative to
            search_dir: Directory to search for challenge files (defaults to root_dir)
            pattern: Glob matching challenge files
        """
        self.root_dir = Path(root_dir).resolve()
        self.search_dir = Path(search_dir) if search_dir else self.root_dir
        self.pattern = pattern

    def discover(self) -> list[Path]:
        """Find challenge files in a stable order."""
        return sorted(p for p in self.search_dir.glob(self.pattern) if p.is_file())

    def build(self) -> list[Question]:
        """Load every challenge file and return the normalized questions.

        A broken file or a question with an out-of-range answer index is
        logged and left out; the rest of the catalog is still built. When two
        questions share an identity the first one in file order wins.
        """
        questions: list[Question] = []
        seen: set[str] = set()
        for path in self.discover():
            try:
                loaded = self.load_file(path)
            except DocumentError as e:
                logger.warning("Skipping challenge file %s", e)
                continue
            for question in loaded:
                if question.identity in seen:
                    logger.warning(
                        "Dropping duplicate question '%s' from %s",
                        question.identity,
                        path,
                    )
                    continue
                seen.add(question.identity)
                questions.append(question)
        logger.info("Catalog built: %d questions", len(questions))
        return questions

    def load_file(self, path: Path) -> list[Question]:
        """Normalize all questions defined in one file."""
        path = path.resolve()
        document = load_document(path)
        if document is None:
            return []

        entries = document if isinstance(document, list) else [document]
        group = base_group_for(path, self.root_dir)
        multiple = len(entries) > 1

        questions = []
        for ordinal, raw in enumerate(entries, start=1):
            if not isinstance(raw, dict):
                logger.warning("Ignoring non-mapping entry #%d in %s", ordinal, path)
                continue

            if raw.get("name"):
                identity = str(raw["name"])
            else:
                identity = f"{group}-{ordinal}" if multiple else group

            try:
                question = self._normalize(raw, identity, path.parent, group)
            except (ResolutionError, DocumentError) as e:
                logger.warning("Excluding question '%s': %s", identity, e)
                continue
            if question is not None:
                questions.append(question)

        return questions

    def _normalize(
        self,
        raw: dict,
        identity: str,
        working_directory: Path,
        group: str,
    ) -> Optional[Question]:
        """Build one Question from a raw mapping, or None for scaffolding."""
        message = raw.get("message")
        qtype = raw.get("type")
        if not message or not qtype:
            return None

        qtype = str(qtype)
        prompt_text = str(message)
        choices = _as_list(raw.get("choices"))
        answer = raw.get("answer")
        default = raw.get("default")
        sources = [str(s) for s in _as_list(raw.get("source"))]

        if qtype == QuestionType.LIST.value:
            answer = resolve_index(answer, choices, identity)
        elif qtype == QuestionType.CHECKBOX.value and isinstance(answer, list):
            answer = [resolve_index(a, choices, identity) for a in answer]
        elif qtype == QuestionType.FILE.value:
            if default is not None:
                default = str(working_directory / str(default))
            prompt_text += DIVIDER + "Work out the following source:\n"
            for source in sources:
                prompt_text += f"- {working_directory / source}\n"
            prompt_text += "\n\nReady to verify against the following test?"

        message_file = raw.get("messageFile")
        if message_file:
            content = read_text(working_directory / str(message_file))
            prompt_text = prompt_text + "\n\n" + content + DIVIDER

        return Question(
            identity=identity,
            type=qtype,
            prompt_text=prompt_text,
            choices=choices,
            expected_answer=answer,
            default=default,
            source=sources,
            message_file=str(message_file) if message_file else None,
            working_directory=working_directory,
            base_group=group,
        )
