"""Conversation session: message history and the idle/processing state machine."""

from __future__ import annotations

import logging
import threading
from enum import Enum

from ..domain import (
    HistoryTurn,
    Message,
    RejectionReason,
    SessionState,
    Speaker,
    SubmissionOutcome,
)
from ..domain.exceptions import InvalidTransitionError, LegalChatError
from ..domain.utils import is_blank
from ..ports.llm_port import ChatModelPort
from .context_assembler import ContextAssembler, filter_history
from .document_repository import DocumentRepository
from .prompts import UNKNOWN_ERROR_TEXT

logger = logging.getLogger(__name__)


class SessionEvent(Enum):
    """Events that drive the session state machine."""

    SUBMIT = "submit"
    SUCCESS = "success"
    FAILURE = "failure"


TRANSITIONS: dict[tuple[SessionState, SessionEvent], SessionState] = {
    (SessionState.IDLE, SessionEvent.SUBMIT): SessionState.PROCESSING,
    (SessionState.PROCESSING, SessionEvent.SUCCESS): SessionState.IDLE,
    (SessionState.PROCESSING, SessionEvent.FAILURE): SessionState.IDLE,
}


def describe_failure(exc: Exception) -> str:
    """User-facing text for a failed model call."""
    if isinstance(exc, LegalChatError):
        return exc.message
    return str(exc) or UNKNOWN_ERROR_TEXT


class ConversationSession:
    """One long-lived conversation grounded in a document repository.

    At most one question is in flight: ``submit`` is only accepted in the
    IDLE state and always returns the session to IDLE with a recorded
    assistant message, whether the model call succeeds or fails.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        model: ChatModelPort,
        assembler: ContextAssembler | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            repository: Documents the answers are grounded in.
            model: Chat model capability.
            assembler: Builds the system prompt; a default one is created if omitted.
        """
        self.repository = repository
        self.model = model
        self.assembler = assembler or ContextAssembler()
        self._state = SessionState.IDLE
        self._messages: list[Message] = []
        # Guards the state and history; never held across the model call
        self._lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_processing(self) -> bool:
        return self._state is SessionState.PROCESSING

    @property
    def messages(self) -> list[Message]:
        """Copy of the history in chronological order."""
        return list(self._messages)

    def replay_history(self) -> list[HistoryTurn]:
        """History as it would be replayed to the model right now."""
        return filter_history(self._messages, self.model.roles)

    def _fire(self, event: SessionEvent) -> None:
        target = TRANSITIONS.get((self._state, event))
        if target is None:
            raise InvalidTransitionError(
                f"Event {event.value!r} is not allowed while {self._state.value}",
                context={"state": self._state.value, "event": event.value},
            )
        logger.debug("Session %s --%s--> %s", self._state.value, event.value, target.value)
        self._state = target

    def _rejection_reason(self, question: str) -> RejectionReason | None:
        if self._state is not SessionState.IDLE:
            return RejectionReason.BUSY
        if is_blank(question):
            return RejectionReason.EMPTY_QUESTION
        if self.repository.is_empty:
            return RejectionReason.NO_DOCUMENTS
        return None

    def submit(self, question: str) -> SubmissionOutcome:
        """Ask a question against the current documents.

        Args:
            question: The user's question.

        Returns:
            A rejected outcome (nothing recorded) when the session is busy, the
            question is blank or there are no documents; otherwise an accepted
            outcome carrying the assistant reply, which is marked ``failed``
            when the model call raised.
        """
        with self._lock:
            reason = self._rejection_reason(question)
            if reason is None:
                self._fire(SessionEvent.SUBMIT)
                prior_history = list(self._messages)
                self._messages.append(Message(speaker=Speaker.USER, text=question))
        if reason is not None:
            logger.info("Question rejected: %s", reason.value)
            return SubmissionOutcome(accepted=False, reason=reason)

        try:
            prompt = self.assembler.assemble(
                self.repository.list(), prior_history, self.model.roles
            )
            answer = self.model.complete(prompt.system_prompt, prompt.history, question)
        except Exception as exc:
            logger.exception("Model call failed: %s", exc)
            reply = Message(speaker=Speaker.ASSISTANT, text=describe_failure(exc), failed=True)
            self._finish(reply, SessionEvent.FAILURE)
            return SubmissionOutcome(accepted=True, reply=reply)

        reply = Message(speaker=Speaker.ASSISTANT, text=answer)
        self._finish(reply, SessionEvent.SUCCESS)
        return SubmissionOutcome(accepted=True, reply=reply)

    def _finish(self, reply: Message, event: SessionEvent) -> None:
        with self._lock:
            self._messages.append(reply)
            self._fire(event)

    def reset(self) -> bool:
        """Start a new conversation; refused while a question is in flight."""
        with self._lock:
            if self.is_processing:
                return False
            self._messages.clear()
            return True
