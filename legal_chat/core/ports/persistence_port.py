"""Document persistence port."""

from __future__ import annotations

from typing import Protocol

from ..domain import LegalDocument


class DocumentStorePort(Protocol):
    """Best-effort durable storage for the document library.

    ``save`` receives the full working set in raw order and replaces whatever
    was stored before.
    """

    def save(self, documents: list[LegalDocument]) -> None:  # pragma: no cover - protocol
        ...

    def load(self) -> list[LegalDocument]:  # pragma: no cover - protocol
        ...
