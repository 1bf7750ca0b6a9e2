"""Library service: extraction, upsert and persistence of grounding documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from ..domain import LegalDocument
from ..domain.exceptions import EmptyDocumentError, ExtractionError
from ..domain.utils import clean_name, is_blank
from ..ports.extraction_port import TextExtractorPort
from ..ports.persistence_port import DocumentStorePort
from .context_assembler import order_for_display
from .document_repository import DocumentRepository

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of importing one file in a batch."""

    name: str
    document: LegalDocument | None = None
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


class DocumentLibrary:
    """Orchestrates the document repository and its external collaborators.

    The repository itself never performs I/O; this service saves the working
    set after every mutation. Saving is best effort: a failing store is logged
    and never undoes or blocks the in-memory change.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        extractor: TextExtractorPort,
        store: DocumentStorePort | None = None,
    ) -> None:
        self.repository = repository
        self.extractor = extractor
        self.store = store

    def load(self) -> int:
        """Restore the repository from the store.

        Returns:
            Number of documents restored (0 when the store is missing or fails).
        """
        if self.store is None:
            return 0
        try:
            documents = self.store.load()
        except Exception as exc:
            logger.warning("Could not load persisted documents: %s", exc)
            return 0
        self.repository.restore(documents)
        logger.info("Restored %d document(s) from storage", len(self.repository))
        return len(self.repository)

    def _persist(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(self.repository.list())
        except Exception as exc:
            logger.warning("Could not persist documents: %s", exc)

    def add_text(self, name: str, content: str, effective_date: date) -> LegalDocument:
        """Upsert an already-extracted document.

        Raises:
            EmptyDocumentError: If ``content`` is blank.
        """
        name = clean_name(name)
        if is_blank(content):
            raise EmptyDocumentError(
                "File trống hoặc không thể trích xuất văn bản.", context={"name": name}
            )
        stored = self.repository.upsert(
            LegalDocument(name=name, content=content, effective_date=effective_date)
        )
        self._persist()
        return stored

    def add_file(self, name: str, data: bytes, effective_date: date) -> LegalDocument:
        """Extract text from a raw file and upsert it.

        Raises:
            ExtractionError: If the file cannot be turned into text.
        """
        content = self.extractor.extract(name, data)
        return self.add_text(name, content, effective_date)

    def add_files(
        self, files: Iterable[tuple[str, bytes]], effective_date: date
    ) -> list[ImportResult]:
        """Import files one after another; a failing file does not stop the batch."""
        results: list[ImportResult] = []
        for name, data in files:
            try:
                document = self.add_file(name, data, effective_date)
            except ExtractionError as exc:
                logger.warning("Skipping %s: %s", name, exc.message)
                results.append(ImportResult(name=name, error=exc))
            else:
                results.append(ImportResult(name=name, document=document))
        return results

    def remove(self, document_id: str) -> bool:
        """Remove a document by id; unknown ids are ignored."""
        removed = self.repository.remove(document_id)
        if removed:
            self._persist()
        return removed

    def documents(self) -> list[LegalDocument]:
        """Documents in display order (legal priority, then newest)."""
        return order_for_display(self.repository.list())

    @property
    def is_empty(self) -> bool:
        return self.repository.is_empty
