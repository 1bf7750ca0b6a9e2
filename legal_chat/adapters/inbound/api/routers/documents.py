"""Document library endpoints: upload, list and remove grounding documents."""

import logging
from datetime import date

from fastapi import APIRouter, File, Form, UploadFile

from ..deps import get_library
from ..models import (
    DocumentListResponse,
    DocumentResponse,
    ErrorResponse,
    ImportResponse,
    ImportResultResponse,
    TextDocumentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


@router.get("", response_model=DocumentListResponse)
async def list_documents() -> DocumentListResponse:
    """List documents in display order (legal rank, then newest effective date)."""
    documents = [DocumentResponse.from_document(doc) for doc in get_library().documents()]
    return DocumentListResponse(documents=documents, count=len(documents))


@router.post("", response_model=ImportResponse)
async def upload_documents(
    files: list[UploadFile] = File(..., description="PDF, DOCX, DOC, XLSX or text files"),
    effective_date: date | None = Form(None, description="Effective date, defaults to today"),
) -> ImportResponse:
    """Upload one or more files.

    Each file is extracted independently; a file that cannot be read is
    reported in its result entry and does not stop the others. A file whose
    name is already in the library replaces the old version.
    """
    library = get_library()
    effective = effective_date or date.today()

    payload = []
    for upload in files:
        payload.append((upload.filename or "untitled", await upload.read()))

    results = []
    for result in library.add_files(payload, effective):
        if result.ok:
            results.append(
                ImportResultResponse(
                    name=result.name, document=DocumentResponse.from_document(result.document)
                )
            )
        else:
            results.append(
                ImportResultResponse(
                    name=result.name,
                    error=result.error.message,
                    error_code=result.error.error_code,
                )
            )

    imported = sum(1 for result in results if result.document is not None)
    logger.info("Upload finished: %d imported, %d failed", imported, len(results) - imported)
    return ImportResponse(results=results, imported=imported, failed=len(results) - imported)


@router.post(
    "/text",
    response_model=DocumentResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse, "description": "Empty content"}},
)
async def add_text_document(request: TextDocumentRequest) -> DocumentResponse:
    """Add a document from already-extracted text."""
    document = get_library().add_text(request.name, request.content, request.effective_date)
    return DocumentResponse.from_document(document)


@router.delete("/{document_id}", status_code=204)
async def remove_document(document_id: str) -> None:
    """Remove a document; unknown ids are ignored."""
    if not get_library().remove(document_id):
        logger.info("Remove ignored, no document with id %s", document_id)
