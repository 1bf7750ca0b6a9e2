"""Persistence exceptions."""

from .base import LegalChatError


class PersistenceError(LegalChatError):
    """Saving or loading the document library failed."""

    error_code = "LC_STO_001"
