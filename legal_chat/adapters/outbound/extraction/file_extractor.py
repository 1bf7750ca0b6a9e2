"""Text extraction from uploaded files (PDF, Word, Excel and plain text)."""

from __future__ import annotations

import csv
import io
import logging
import re
from collections.abc import Callable
from pathlib import PurePath

from ....core.domain.exceptions import (
    CorruptDocumentError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFormatError,
)
from ....core.domain.utils import clean_text, is_blank

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".md", ".csv", ".json")

LEGACY_DOC_NOTICE = "[LƯU Ý: Đây là nội dung trích xuất thô từ file .doc cũ]"

# Keep printable ASCII, tab/newlines and everything from Latin-1 upwards
_BINARY_NOISE = re.compile(r"[^\x09\x0A\x0D\x20-\x7E\xA0-\uFFFF]")
_WHITESPACE_RUN = re.compile(r"\s+")

MIN_LEGACY_TEXT_LENGTH = 10


def _extension(name: str) -> str:
    return PurePath(name.lower()).suffix


class FileTextExtractor:
    """Extract plain text from a raw file based on its extension.

    Supported: ``.pdf`` (pypdf), ``.docx`` (python-docx), ``.doc`` (best
    effort), ``.xlsx`` (openpyxl), ``.xls`` (xlrd) and UTF-8 text formats.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[bytes], str]] = {
            ".pdf": self._extract_pdf,
            ".docx": self._extract_docx,
            ".doc": self._extract_legacy_doc,
            ".xlsx": self._extract_xlsx,
            ".xls": self._extract_xls,
        }
        for extension in TEXT_EXTENSIONS:
            self._handlers[extension] = self._extract_plain_text

    def supports(self, name: str) -> bool:
        return _extension(name) in self._handlers

    def extract(self, name: str, data: bytes) -> str:
        """Extract text from a file.

        Args:
            name: File name; the extension selects the reader.
            data: Raw file bytes.

        Returns:
            Extracted text.

        Raises:
            UnsupportedFormatError: If the extension is not supported.
            CorruptDocumentError: If the reader cannot parse the file.
            EmptyDocumentError: If no text could be extracted.
        """
        handler = self._handlers.get(_extension(name))
        if handler is None:
            raise UnsupportedFormatError(
                "Định dạng file không được hỗ trợ. "
                "Vui lòng sử dụng PDF, DOCX, DOC, XLSX, XLS hoặc Text.",
                context={"name": name},
            )

        try:
            text = handler(data)
        except ExtractionError as exc:
            exc.extra_context.setdefault("name", name)
            raise
        except Exception as exc:
            raise CorruptDocumentError(
                f"Không thể đọc file {name}. Lỗi: {exc}", cause=exc, context={"name": name}
            ) from exc

        if is_blank(text):
            raise EmptyDocumentError(
                "File trống hoặc không thể trích xuất văn bản.", context={"name": name}
            )
        logger.debug("Extracted %d characters from %s", len(text), name)
        return text

    def _extract_pdf(self, data: bytes) -> str:
        from pypdf import PdfReader

        reader = PdfReader(io.BytesIO(data))
        parts = []
        for number, page in enumerate(reader.pages, start=1):
            page_text = clean_text(page.extract_text() or "", normalize=False)
            parts.append(f"--- Page {number} ---\n{page_text}\n")
        if all(is_blank(part.split("\n", 1)[1]) for part in parts):
            return ""
        return "".join(parts)

    def _extract_docx(self, data: bytes) -> str:
        from docx import Document

        document = Document(io.BytesIO(data))
        parts = [para.text for para in document.paragraphs if para.text.strip()]
        for table in document.tables:
            for row in table.rows:
                parts.append(" | ".join(cell.text.strip() for cell in row.cells))
        return "\n".join(parts)

    def _extract_legacy_doc(self, data: bytes) -> str:
        # Many .doc uploads are really renamed .docx files
        try:
            return self._extract_docx(data)
        except Exception as exc:
            logger.warning("python-docx failed for .doc, attempting raw text extraction: %s", exc)

        decoded = data.decode("utf-8", errors="replace")
        cleaned = _WHITESPACE_RUN.sub(" ", _BINARY_NOISE.sub(" ", clean_text(decoded))).strip()
        if len(cleaned) < MIN_LEGACY_TEXT_LENGTH:
            raise CorruptDocumentError(
                "Không hỗ trợ định dạng .doc này. Vui lòng chuyển sang .docx. "
                "(Không tìm thấy nội dung văn bản rõ ràng.)"
            )
        return f"{LEGACY_DOC_NOTICE}\n{cleaned}"

    def _extract_xlsx(self, data: bytes) -> str:
        from openpyxl import load_workbook

        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
        try:
            parts = [
                _sheet_section(sheet.title, sheet.iter_rows(values_only=True))
                for sheet in workbook.worksheets
            ]
        finally:
            workbook.close()
        return "".join(parts)

    def _extract_xls(self, data: bytes) -> str:
        import xlrd

        book = xlrd.open_workbook(file_contents=data)
        try:
            parts = []
            for sheet in book.sheets():
                rows = (sheet.row_values(index) for index in range(sheet.nrows))
                parts.append(_sheet_section(sheet.name, rows))
        finally:
            book.release_resources()
        return "".join(parts)

    def _extract_plain_text(self, data: bytes) -> str:
        return data.decode("utf-8-sig", errors="replace")


def _cell(value: object) -> object:
    if value is None:
        return ""
    # Legacy workbooks store every number as a float
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _sheet_section(title: str, rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        writer.writerow([_cell(value) for value in row])
    return f"--- Sheet: {title} ---\n{buffer.getvalue()}\n"
