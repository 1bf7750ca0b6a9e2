"""Configuration-related exceptions."""

from .base import LegalChatError


class ConfigurationError(LegalChatError):
    """Configuration or environment variable errors."""

    error_code = "LC_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "LC_CFG_002"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "LC_CFG_003"
