"""Unit tests for the in-memory document repository."""

from datetime import UTC, date, datetime

import pytest

from legal_chat.core.services.document_repository import DocumentRepository

pytestmark = pytest.mark.unit


class TickingClock:
    """Clock returning one hour later on every call."""

    def __init__(self):
        self.hour = 0

    def __call__(self):
        self.hour += 1
        return datetime(2025, 1, 1, self.hour, tzinfo=UTC)


class TestUpsert:
    """Insert and replace by name."""

    def test_insert_goes_first(self, repository, doc):
        first = repository.upsert(doc("A.pdf"))
        second = repository.upsert(doc("B.pdf"))

        assert repository.list() == [second, first]
        assert len(repository) == 2

    def test_same_name_replaces_in_place(self, doc):
        repository = DocumentRepository(clock=TickingClock())
        original = repository.upsert(doc("A.pdf", date(2020, 1, 1), "old"))
        repository.upsert(doc("B.pdf"))

        replaced = repository.upsert(doc("A.pdf", date(2024, 6, 1), "new"))

        assert len(repository) == 2
        assert replaced.id == original.id
        assert replaced.content == "new"
        assert replaced.effective_date == date(2024, 6, 1)
        assert replaced.uploaded_at == datetime(2025, 1, 1, 1, tzinfo=UTC)
        # Keeps its slot, B stays first
        assert [d.name for d in repository.list()] == ["B.pdf", "A.pdf"]

    def test_names_are_unique_after_many_upserts(self, repository, doc):
        for content in ("v1", "v2", "v3"):
            repository.upsert(doc("Luật Giáo dục.pdf", content=content))

        assert len(repository) == 1
        assert repository.find_by_name("Luật Giáo dục.pdf").content == "v3"

    def test_names_are_case_sensitive(self, repository, doc):
        repository.upsert(doc("a.pdf"))
        repository.upsert(doc("A.pdf"))
        assert len(repository) == 2


class TestRemove:
    """Removal by identity."""

    def test_remove_existing(self, repository, doc):
        stored = repository.upsert(doc("A.pdf"))
        repository.upsert(doc("B.pdf"))

        assert repository.remove(stored.id) is True
        assert [d.name for d in repository.list()] == ["B.pdf"]
        assert repository.get(stored.id) is None

    def test_remove_unknown_id_is_noop(self, repository, doc):
        repository.upsert(doc("A.pdf"))
        before = repository.list()

        assert repository.remove("does-not-exist") is False
        assert repository.list() == before

    def test_remove_last_document_empties_repository(self, repository, doc):
        stored = repository.upsert(doc("A.pdf"))
        repository.remove(stored.id)
        assert repository.is_empty


class TestRestore:
    """Restoring a persisted working set."""

    def test_restore_keeps_order_and_identity(self, repository, doc):
        documents = [doc("B.pdf"), doc("A.pdf")]
        repository.upsert(doc("stale.pdf"))

        repository.restore(documents)

        assert repository.list() == documents
        assert repository.find_by_name("stale.pdf") is None

    def test_restore_first_duplicate_wins(self, repository, doc):
        first = doc("A.pdf", content="first")
        repository.restore([first, doc("A.pdf", content="second")])

        assert repository.list() == [first]


def test_list_returns_a_copy(repository, doc):
    repository.upsert(doc("A.pdf"))
    listed = repository.list()
    listed.clear()
    assert len(repository) == 1


def test_new_repository_is_empty(repository):
    assert repository.is_empty
    assert repository.list() == []
