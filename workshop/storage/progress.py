"""Progress reporting over the question catalog."""

from ..challenges.types import Question
from .database import ProgressStore


class ProgressTracker:
    """Report which catalog questions have been passed."""

    def __init__(self, store: ProgressStore):
        """Initialize the progress tracker.

        Args:
            store: An open ProgressStore
        """
        self.store = store

    async def get_summary(self, questions: list[Question]) -> dict:
        """Get a summary of progress over a catalog.

        Returns:
            Dict with per-question pass flags and totals
        """
        passed = await self.store.passed_identities()
        entries = [
            {"identity": q.identity, "type": q.type, "passed": q.identity in passed}
            for q in questions
        ]
        return {
            "questions": entries,
            "passed": sum(1 for e in entries if e["passed"]),
            "total": len(entries),
        }

    @staticmethod
    def format_summary(summary: dict) -> list[str]:
        """Render a summary as status lines."""
        lines = [
            f"[{'x' if e['passed'] else ' '}] {e['identity']} ({e['type']})"
            for e in summary["questions"]
        ]
        lines.append(f"{summary['passed']}/{summary['total']} challenges passed")
        return lines
