"""LLM exceptions."""

from .base import LegalChatError


class LLMError(LegalChatError):
    """Base error for model calls."""

    error_code = "LC_LLM_001"


class LLMConnectionError(LLMError):
    """Failed to reach the model provider.

    Common causes:
    - Network issues
    - Service unavailable
    """

    error_code = "LC_LLM_002"


class LLMRateLimitError(LLMError):
    """Quota or rate limit exceeded on the model provider."""

    error_code = "LC_LLM_003"


class LLMGenerationError(LLMError):
    """Provider rejected or failed the generation request.

    Common causes:
    - Invalid API key
    - Content filtered by safety settings
    - Context too large for the model
    """

    error_code = "LC_LLM_004"
