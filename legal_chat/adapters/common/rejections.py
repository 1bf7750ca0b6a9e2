"""Translate rejected submissions into validation errors for the inbound adapters."""

from ...core.domain import RejectionReason
from ...core.domain.exceptions import (
    EmptyQuestionError,
    NoDocumentsError,
    SessionBusyError,
    ValidationError,
)


def rejection_error(reason: RejectionReason) -> ValidationError:
    """Exception describing why a question was not accepted."""
    if reason is RejectionReason.EMPTY_QUESTION:
        return EmptyQuestionError("Câu hỏi không được để trống.")
    if reason is RejectionReason.NO_DOCUMENTS:
        return NoDocumentsError("Vui lòng tải lên ít nhất một văn bản trước khi đặt câu hỏi.")
    return SessionBusyError("Đang xử lý câu hỏi trước, vui lòng chờ.")
