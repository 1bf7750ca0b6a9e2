"""SQLite adapter persisting the document library."""

import logging
import sqlite3
from datetime import date, datetime
from pathlib import Path

from ....core.domain import LegalDocument
from ....core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SQLiteDocumentStore:
    """Stores the whole working set of documents in one table.

    ``position`` records raw repository order so that a restored library
    lists documents exactly as before.
    """

    def __init__(self, db_path: str | Path = "data/documents.db") -> None:
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_db()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _init_db(self) -> None:
        """Initialize the database schema."""
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS documents (
                        id TEXT PRIMARY KEY,
                        name TEXT NOT NULL UNIQUE,
                        content TEXT NOT NULL,
                        effective_date TEXT NOT NULL,
                        uploaded_at TEXT NOT NULL,
                        position INTEGER NOT NULL
                    )
                """)
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to initialize database: {e}")
            raise PersistenceError(
                "Failed to initialize document database",
                cause=e,
                context={"db_path": str(self.db_path)},
            ) from e

    def save(self, documents: list[LegalDocument]) -> None:
        """Replace the stored library with ``documents`` (raw order).

        Raises:
            PersistenceError: If the write fails; the stored data is left unchanged.
        """
        rows = [
            (
                doc.id,
                doc.name,
                doc.content,
                doc.effective_date.isoformat(),
                doc.uploaded_at.isoformat(),
                position,
            )
            for position, doc in enumerate(documents)
        ]
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute("DELETE FROM documents")
                conn.executemany(
                    """
                    INSERT INTO documents (id, name, content, effective_date, uploaded_at, position)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to save documents: {e}")
            raise PersistenceError(
                "Failed to save documents",
                cause=e,
                context={"db_path": str(self.db_path), "count": len(rows)},
            ) from e

    def load(self) -> list[LegalDocument]:
        """Load the stored library in raw order.

        Raises:
            PersistenceError: If the database cannot be read.
        """
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.execute(
                    "SELECT id, name, content, effective_date, uploaded_at "
                    "FROM documents ORDER BY position"
                )
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to load documents: {e}")
            raise PersistenceError(
                "Failed to load documents", cause=e, context={"db_path": str(self.db_path)}
            ) from e

        return [
            LegalDocument(
                id=doc_id,
                name=name,
                content=content,
                effective_date=date.fromisoformat(effective_date),
                uploaded_at=datetime.fromisoformat(uploaded_at),
            )
            for doc_id, name, content, effective_date, uploaded_at in rows
        ]
