"""Legal document model held in the working library."""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, date, datetime


def new_document_id() -> str:
    """Opaque identity for a newly extracted document."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LegalDocument:
    """A grounding document extracted from an uploaded file.

    Documents are never mutated in place: a re-upload of the same name produces
    a replacement that keeps the original ``id``.

    Attributes:
        name: Display name, normally the uploaded file name. Unique in the library.
        content: Full extracted text, passed to the model verbatim.
        effective_date: Date the instrument took effect, supplied by the uploader.
        id: Opaque identity used for removal.
        uploaded_at: When this version was added (UTC).
    """

    name: str
    content: str
    effective_date: date
    id: str = field(default_factory=new_document_id)
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))
