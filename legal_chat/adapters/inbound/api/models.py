"""Pydantic models for API requests and responses."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ....core.domain import LegalDocument, Message
from ....core.services.rank_classifier import classify, rank_label


class DocumentResponse(BaseModel):
    """A document in the library, with its computed legal rank."""

    id: str = Field(..., description="Opaque document identity")
    name: str = Field(..., description="Document name, unique in the library")
    effective_date: date = Field(..., description="Date the instrument took effect")
    uploaded_at: datetime = Field(..., description="When this version was added")
    rank: int = Field(..., description="Legal-authority tier, 1 is highest, 99 unranked")
    rank_label: str = Field(..., description="Display label of the tier")
    characters: int = Field(..., description="Length of the extracted text")

    @classmethod
    def from_document(cls, document: LegalDocument) -> "DocumentResponse":
        rank = classify(document.name)
        return cls(
            id=document.id,
            name=document.name,
            effective_date=document.effective_date,
            uploaded_at=document.uploaded_at,
            rank=rank,
            rank_label=rank_label(rank),
            characters=len(document.content),
        )


class DocumentListResponse(BaseModel):
    """Documents in display order (rank, then newest effective date)."""

    documents: list[DocumentResponse] = Field(default_factory=list)
    count: int = Field(..., description="Number of documents")


class TextDocumentRequest(BaseModel):
    """Request model for adding already-extracted text."""

    name: str = Field(
        ...,
        min_length=1,
        description="Document name; an existing name is replaced",
        json_schema_extra={"example": "Luật Giáo dục.pdf"},
    )
    content: str = Field(..., description="Full document text")
    effective_date: date = Field(..., description="Effective date (YYYY-MM-DD)")


class ImportResultResponse(BaseModel):
    """Outcome of importing one uploaded file."""

    name: str
    document: DocumentResponse | None = None
    error: str | None = Field(None, description="Extraction error message")
    error_code: str | None = None


class ImportResponse(BaseModel):
    """Outcome of a multi-file upload."""

    results: list[ImportResultResponse] = Field(default_factory=list)
    imported: int
    failed: int


class QuestionRequest(BaseModel):
    """Request model for asking a question."""

    question: str = Field(
        ...,
        max_length=4000,
        description="Question about the loaded documents",
        json_schema_extra={
            "example": "Doanh nghiệp mở trường mầm non áp giá bán điện nào?"
        },
    )


class MessageResponse(BaseModel):
    """A single message in the conversation history."""

    id: str
    speaker: str = Field(..., description="user or assistant")
    text: str
    sent_at: datetime
    failed: bool = Field(False, description="True when the message records an error")

    @classmethod
    def from_message(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            speaker=message.speaker.value,
            text=message.text,
            sent_at=message.sent_at,
            failed=message.failed,
        )


class AnswerResponse(BaseModel):
    """Response model for an answered (or failed) question."""

    question: str = Field(..., description="The question asked")
    answer: str = Field(..., description="Model answer, or the error text when failed")
    failed: bool = Field(False, description="True when the model call failed")
    message: MessageResponse


class HistoryResponse(BaseModel):
    """Conversation history."""

    messages: list[MessageResponse] = Field(default_factory=list)
    state: str = Field(..., description="idle or processing")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    documents: int = Field(0, description="Documents in the library")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., LC_VAL_003)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "NoDocumentsError", "code": "LC_VAL_003", "message": "..."},
            "location": {"class": "<module>", "method": "ask_question", ...},
            "stack_trace": ["Traceback...", ...]  # Only in debug mode
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    location: ErrorLocation | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
