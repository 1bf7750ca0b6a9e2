"""Core services: ranking, repository, context assembly and the chat session."""

from .context_assembler import (
    ContextAssembler,
    build_context,
    build_system_prompt,
    filter_history,
    order_for_display,
)
from .conversation_session import ConversationSession
from .document_library import DocumentLibrary, ImportResult
from .document_repository import DocumentRepository
from .rank_classifier import UNRANKED, classify, rank_label

__all__ = [
    "classify",
    "rank_label",
    "UNRANKED",
    "DocumentRepository",
    "ContextAssembler",
    "build_context",
    "build_system_prompt",
    "filter_history",
    "order_for_display",
    "ConversationSession",
    "DocumentLibrary",
    "ImportResult",
]
