"""SQLite-backed progress store."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

import aiosqlite

from ..errors import StoreOpenError

logger = logging.getLogger(__name__)

DB_FILENAME = "progress.db"


class ProgressStore:
    """Durable set of passed question identities."""

    def __init__(self, store_dir: Path):
        """Initialize the store.

        Args:
            store_dir: Directory holding the database; created on open.
        """
        self.store_dir = Path(store_dir)
        self.db_path = self.store_dir / DB_FILENAME
        self._connection: Optional[aiosqlite.Connection] = None

    async def open(self) -> None:
        """Open the store, creating it if missing.

        Raises:
            StoreOpenError: if the directory or database cannot be set up
        """
        try:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            self._connection = await aiosqlite.connect(self.db_path)
            await self._create_tables()
        except (OSError, sqlite3.Error) as e:
            await self.close()
            raise StoreOpenError(f"Cannot open progress store at {self.store_dir}: {e}") from e
        logger.debug("Progress store opened at %s", self.db_path)

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            logger.debug("Progress store closed")

    async def __aenter__(self) -> "ProgressStore":
        await self.open()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _create_tables(self) -> None:
        """Create database tables if they don't exist."""
        assert self._connection is not None

        await self._connection.executescript("""
            CREATE TABLE IF NOT EXISTS passed_questions (
                identity TEXT PRIMARY KEY,
                passed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)
        await self._connection.commit()

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the database connection."""
        if self._connection is None:
            raise RuntimeError("Progress store not open. Call open() first.")
        return self._connection

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    async def passed_identities(self) -> set[str]:
        """Read every passed identity."""
        async with self.connection.execute(
            "SELECT identity FROM passed_questions"
        ) as cursor:
            rows = await cursor.fetchall()
            return {row[0] for row in rows}

    async def mark_passed(self, identity: str) -> None:
        """Record a pass. Committed before returning."""
        await self.connection.execute(
            """
            INSERT INTO passed_questions (identity)
            VALUES (?)
            ON CONFLICT(identity) DO NOTHING
            """,
            (identity,),
        )
        await self.connection.commit()

    async def is_passed(self, identity: str) -> bool:
        """Check if a question has been passed."""
        async with self.connection.execute(
            "SELECT 1 FROM passed_questions WHERE identity = ?",
            (identity,),
        ) as cursor:
            return await cursor.fetchone() is not None
