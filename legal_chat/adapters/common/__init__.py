"""Helpers shared by the inbound adapters."""

from .exception_handler import (
    format_exception_json,
    get_error_code,
    get_http_status_code,
    log_exception,
)
from .rejections import rejection_error

__all__ = [
    "format_exception_json",
    "log_exception",
    "get_error_code",
    "get_http_status_code",
    "rejection_error",
]
