"""Conversation models: messages, speakers and session state."""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class Speaker(Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class SessionState(Enum):
    """State of a conversation session.

    Attributes:
        IDLE: Ready to accept a question.
        PROCESSING: A question is in flight; new questions are rejected.
    """

    IDLE = "idle"
    PROCESSING = "processing"


class RejectionReason(Enum):
    """Why a submitted question was not accepted."""

    BUSY = "busy"
    EMPTY_QUESTION = "empty_question"
    NO_DOCUMENTS = "no_documents"


@dataclass(frozen=True)
class Message:
    """A single entry in the conversation history.

    Attributes:
        speaker: USER or ASSISTANT.
        text: Message text, or the error text when ``failed`` is set.
        failed: Marks a surfaced error; failed messages are never replayed.
        id: Opaque identity.
        sent_at: Creation time (UTC).
    """

    speaker: Speaker
    text: str
    failed: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    sent_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class HistoryTurn:
    """A message as replayed to the model, in the model's role vocabulary."""

    role: str
    text: str


@dataclass(frozen=True)
class AssembledPrompt:
    """System prompt plus filtered history, ready for the model port."""

    system_prompt: str
    history: list[HistoryTurn]


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of ``ConversationSession.submit``.

    A rejected submission carries a ``reason`` and leaves the session untouched.
    An accepted one carries the assistant ``reply``, which may be a failed message.
    """

    accepted: bool
    reason: RejectionReason | None = None
    reply: Message | None = None

    @property
    def failed(self) -> bool:
        return self.reply is not None and self.reply.failed
