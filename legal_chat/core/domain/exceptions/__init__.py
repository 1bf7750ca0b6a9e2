"""Exception hierarchy for the legal chat assistant.

Import from this package directly:

    from legal_chat.core.domain.exceptions import LegalChatError, ExtractionError
"""

# Base classes
from .base import ExceptionContext, LegalChatError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingAPIKeyError,
)

# Extraction exceptions
from .extraction import (
    CorruptDocumentError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFormatError,
)

# LLM exceptions
from .llm import (
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
)

# Persistence exceptions
from .persistence import PersistenceError

# Session exceptions
from .session import InvalidTransitionError, SessionError

# Validation exceptions
from .validation import (
    EmptyQuestionError,
    NoDocumentsError,
    SessionBusyError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "LegalChatError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidConfigurationError",
    # Extraction
    "ExtractionError",
    "UnsupportedFormatError",
    "EmptyDocumentError",
    "CorruptDocumentError",
    # LLM
    "LLMError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMGenerationError",
    # Persistence
    "PersistenceError",
    # Session
    "SessionError",
    "InvalidTransitionError",
    # Validation
    "ValidationError",
    "EmptyQuestionError",
    "NoDocumentsError",
    "SessionBusyError",
]
