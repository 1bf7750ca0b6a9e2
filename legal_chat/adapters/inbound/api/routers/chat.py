"""Chat endpoints for asking questions against the loaded documents."""

import logging

from fastapi import APIRouter

from .....core.domain.exceptions import SessionBusyError
from ....common.rejections import rejection_error
from ..deps import get_session
from ..models import (
    AnswerResponse,
    ErrorResponse,
    HistoryResponse,
    MessageResponse,
    QuestionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["chat"])


@router.post(
    "/ask",
    response_model=AnswerResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty question or no documents"},
        409: {"model": ErrorResponse, "description": "Another question is in flight"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def ask_question(request: QuestionRequest) -> AnswerResponse:
    """Ask a question about the loaded documents.

    A failed model call is not an HTTP error: the failure is recorded in the
    conversation and returned with ``failed`` set.

    Args:
        request: The question request containing the user's question.

    Returns:
        AnswerResponse with the assistant reply.

    Raises:
        ValidationError: If the session rejects the question.
    """
    session = get_session()
    outcome = session.submit(request.question)
    if not outcome.accepted:
        raise rejection_error(outcome.reason)

    reply = outcome.reply
    return AnswerResponse(
        question=request.question,
        answer=reply.text,
        failed=reply.failed,
        message=MessageResponse.from_message(reply),
    )


@router.get("/messages", response_model=HistoryResponse)
async def get_messages() -> HistoryResponse:
    """Full conversation history, failed replies included."""
    session = get_session()
    return HistoryResponse(
        messages=[MessageResponse.from_message(message) for message in session.messages],
        state=session.state.value,
    )


@router.delete(
    "/messages",
    status_code=204,
    responses={409: {"model": ErrorResponse, "description": "Another question is in flight"}},
)
async def reset_messages() -> None:
    """Start a new conversation."""
    if not get_session().reset():
        raise SessionBusyError("Đang xử lý câu hỏi trước, vui lòng chờ.")
