"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest

from legal_chat.core.domain import HistoryTurn, LegalDocument, Speaker
from legal_chat.core.services.document_repository import DocumentRepository


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP API, file formats)")
    config.addinivalue_line("markers", "slow: Slow tests")


class FakeChatModel:
    """Chat model double that records every call.

    ``answers`` are returned in order; an exception instance in the list is
    raised instead. When the list runs out the last answer is repeated.
    """

    roles = {Speaker.USER: "user", Speaker.ASSISTANT: "model"}

    def __init__(self, *answers):
        self.answers = list(answers) or ["Câu trả lời"]
        self.calls: list[tuple[str, list[HistoryTurn], str]] = []
        self.on_complete = None

    def complete(self, system_prompt, history, question):
        self.calls.append((system_prompt, list(history), question))
        if self.on_complete is not None:
            self.on_complete()
        answer = self.answers.pop(0) if len(self.answers) > 1 else self.answers[0]
        if isinstance(answer, Exception):
            raise answer
        return answer


class InMemoryDocumentStore:
    """Document store double keeping the last saved list."""

    def __init__(self, documents=None, fail_on_save=False, fail_on_load=False):
        self.documents = list(documents or [])
        self.fail_on_save = fail_on_save
        self.fail_on_load = fail_on_load
        self.saves = 0

    def save(self, documents):
        if self.fail_on_save:
            raise OSError("disk full")
        self.saves += 1
        self.documents = list(documents)

    def load(self):
        if self.fail_on_load:
            raise OSError("database locked")
        return list(self.documents)


class StaticExtractor:
    """Extractor double that decodes bytes and rejects ``.exe`` files."""

    def supports(self, name):
        return not name.endswith(".exe")

    def extract(self, name, data):
        from legal_chat.core.domain.exceptions import UnsupportedFormatError

        if not self.supports(name):
            raise UnsupportedFormatError("Định dạng file không được hỗ trợ.")
        return data.decode("utf-8")


def make_document(name, effective=date(2024, 1, 1), content=None):
    """Build a LegalDocument with sensible defaults."""
    return LegalDocument(name=name, content=content or f"Nội dung {name}", effective_date=effective)


@pytest.fixture
def fake_model():
    return FakeChatModel()


@pytest.fixture
def repository():
    return DocumentRepository()


@pytest.fixture
def loaded_repository(repository):
    """Repository holding one law and one circular."""
    repository.upsert(make_document("Luật Điện lực 2024.pdf", date(2025, 2, 1)))
    repository.upsert(make_document("Thông tư 16-2014-TT-BCT.pdf", date(2014, 7, 15)))
    return repository


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def static_extractor():
    return StaticExtractor()


@pytest.fixture
def doc():
    """Factory fixture for LegalDocument instances."""
    return make_document


@pytest.fixture
def model_factory():
    """Factory fixture for FakeChatModel instances with scripted answers."""
    return FakeChatModel


@pytest.fixture
def store_factory():
    """Factory fixture for InMemoryDocumentStore instances."""
    return InMemoryDocumentStore
