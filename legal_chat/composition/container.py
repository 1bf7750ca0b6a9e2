"""Composition root wiring adapters to the core services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.extraction.file_extractor import FileTextExtractor
from ..adapters.outbound.llm.gemini_adapter import GeminiChatAdapter
from ..adapters.outbound.persistence.sqlite_store import SQLiteDocumentStore
from ..config import settings
from ..core.services.conversation_session import ConversationSession
from ..core.services.document_library import DocumentLibrary
from ..core.services.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


@lru_cache
def get_repository() -> DocumentRepository:
    return DocumentRepository()


@lru_cache
def get_document_store() -> SQLiteDocumentStore:
    logger.info("Initializing SQLiteDocumentStore at %s", settings.documents_db_path)
    settings.ensure_directories()
    return SQLiteDocumentStore(settings.documents_db_path)


@lru_cache
def get_llm() -> GeminiChatAdapter:
    logger.info("Initializing GeminiChatAdapter...")
    return GeminiChatAdapter(
        api_key=settings.google_api_key,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
    )


@lru_cache
def get_library() -> DocumentLibrary:
    logger.info("Initializing DocumentLibrary...")
    library = DocumentLibrary(get_repository(), FileTextExtractor(), get_document_store())
    library.load()
    return library


@lru_cache
def get_session() -> ConversationSession:
    logger.info("Initializing ConversationSession...")
    library = get_library()
    return ConversationSession(library.repository, get_llm())
