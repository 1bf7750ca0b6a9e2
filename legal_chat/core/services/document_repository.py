"""In-memory working set of legal documents with upsert-by-name identity."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, datetime

from ..domain import LegalDocument

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DocumentRepository:
    """Holds at most one document per name.

    Raw order is newest-insert-first; a replacement keeps the slot of the
    document it replaces. Display order is the context assembler's concern.
    The repository performs no I/O.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock
        self._by_name: dict[str, LegalDocument] = {}
        self._order: list[str] = []

    def upsert(self, document: LegalDocument) -> LegalDocument:
        """Insert a document, or replace the one with the same name.

        A replacement takes the new content and effective date, gets a fresh
        ``uploaded_at`` and keeps the identity of the document it replaces.

        Args:
            document: Newly extracted document.

        Returns:
            The document as stored.
        """
        existing = self._by_name.get(document.name)
        if existing is not None:
            stored = replace(
                existing,
                content=document.content,
                effective_date=document.effective_date,
                uploaded_at=self._clock(),
            )
            self._by_name[document.name] = stored
            logger.info("Replaced document %r (id=%s)", document.name, existing.id)
            return stored

        self._by_name[document.name] = document
        self._order.insert(0, document.name)
        logger.info("Added document %r (id=%s)", document.name, document.id)
        return document

    def remove(self, document_id: str) -> bool:
        """Delete the document with this identity.

        Returns:
            True if a document was removed, False if the id was unknown.
        """
        for name in self._order:
            if self._by_name[name].id == document_id:
                self._order.remove(name)
                del self._by_name[name]
                logger.info("Removed document %r (id=%s)", name, document_id)
                return True
        logger.debug("Remove ignored, unknown document id %s", document_id)
        return False

    def list(self) -> list[LegalDocument]:
        """All documents in raw order (newest insert first)."""
        return [self._by_name[name] for name in self._order]

    def get(self, document_id: str) -> LegalDocument | None:
        return next((doc for doc in self._by_name.values() if doc.id == document_id), None)

    def find_by_name(self, name: str) -> LegalDocument | None:
        return self._by_name.get(name)

    def restore(self, documents: Iterable[LegalDocument]) -> None:
        """Replace the working set with previously persisted documents.

        ``documents`` is in raw order. Should the source contain duplicate
        names, the first occurrence wins.
        """
        self._by_name.clear()
        self._order.clear()
        for document in documents:
            if document.name in self._by_name:
                logger.warning("Skipping duplicate persisted document %r", document.name)
                continue
            self._by_name[document.name] = document
            self._order.append(document.name)

    @property
    def is_empty(self) -> bool:
        return not self._order

    def __len__(self) -> int:
        return len(self._order)
