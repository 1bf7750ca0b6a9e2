"""Text extraction exceptions."""

from .base import LegalChatError


class ExtractionError(LegalChatError):
    """Failed to turn an uploaded file into text."""

    error_code = "LC_EXT_001"


class UnsupportedFormatError(ExtractionError):
    """File extension is not one of the supported formats."""

    error_code = "LC_EXT_002"


class EmptyDocumentError(ExtractionError):
    """File was read but produced no usable text."""

    error_code = "LC_EXT_003"


class CorruptDocumentError(ExtractionError):
    """File could not be parsed by its format reader.

    Common causes:
    - Damaged or truncated upload
    - Encrypted PDF
    - Legacy binary format renamed to a newer extension
    """

    error_code = "LC_EXT_004"
