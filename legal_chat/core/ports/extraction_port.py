"""Text extraction port."""

from __future__ import annotations

from typing import Protocol


class TextExtractorPort(Protocol):
    """Turn a raw uploaded artifact into plain text.

    Implementations raise ``ExtractionError`` subclasses on failure.
    """

    def extract(self, name: str, data: bytes) -> str:  # pragma: no cover - protocol
        ...

    def supports(self, name: str) -> bool:  # pragma: no cover - protocol
        ...
