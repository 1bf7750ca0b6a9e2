"""Conversation session exceptions."""

from .base import LegalChatError


class SessionError(LegalChatError):
    """Error in the conversation state machine."""

    error_code = "LC_SES_001"


class InvalidTransitionError(SessionError):
    """Event is not allowed in the current session state."""

    error_code = "LC_SES_002"
