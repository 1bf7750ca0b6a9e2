"""Domain models for the legal chat assistant.

- document: LegalDocument held in the library
- conversation: Message, Speaker, SessionState and submission results

All models are re-exported here:

    from legal_chat.core.domain import LegalDocument, Message, Speaker
"""

from .conversation import (
    AssembledPrompt,
    HistoryTurn,
    Message,
    RejectionReason,
    SessionState,
    Speaker,
    SubmissionOutcome,
)
from .document import LegalDocument, new_document_id

__all__ = [
    # Document models
    "LegalDocument",
    "new_document_id",
    # Conversation models
    "Speaker",
    "SessionState",
    "RejectionReason",
    "Message",
    "HistoryTurn",
    "AssembledPrompt",
    "SubmissionOutcome",
]
