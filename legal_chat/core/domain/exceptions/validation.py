"""Validation exceptions for rejected questions."""

from .base import LegalChatError


class ValidationError(LegalChatError):
    """Input validation failed."""

    error_code = "LC_VAL_001"


class EmptyQuestionError(ValidationError):
    """Question cannot be empty or whitespace only."""

    error_code = "LC_VAL_002"


class NoDocumentsError(ValidationError):
    """At least one grounding document is required before asking."""

    error_code = "LC_VAL_003"


class SessionBusyError(ValidationError):
    """A question is already being processed."""

    error_code = "LC_VAL_004"
