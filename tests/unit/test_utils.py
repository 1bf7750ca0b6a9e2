import unicodedata

import pytest

from legal_chat.core.domain.utils import clean_name, clean_text, is_blank


class TestCleanText:
    """Unit tests for the shared clean_text helper."""

    @pytest.mark.unit
    def test_removes_bom_and_replacement_characters(self):
        assert clean_text("\ufeffLuật\ufffd Giáo dục") == "Luật Giáo dục"

    @pytest.mark.unit
    def test_composes_decomposed_vietnamese(self):
        decomposed = unicodedata.normalize("NFD", "Quyết định")
        assert clean_text(decomposed) == "Quyết định"

    @pytest.mark.unit
    def test_normalization_can_be_skipped(self):
        decomposed = unicodedata.normalize("NFD", "ủy")
        assert clean_text(decomposed, normalize=False) == decomposed

    @pytest.mark.unit
    def test_empty_text_returns_empty_string(self):
        assert clean_text("") == ""


@pytest.mark.unit
@pytest.mark.parametrize(("text", "blank"), [(None, True), ("", True), (" \n\t", True), ("a", False)])
def test_is_blank(text, blank):
    assert is_blank(text) is blank


class TestCleanName:
    """Canonical document names."""

    def test_composes_and_strips(self):
        decomposed = unicodedata.normalize("NFD", " \ufeffThông tư 13.pdf ")
        assert clean_name(decomposed) == "Thông tư 13.pdf"

    def test_keeps_compatibility_characters(self):
        assert clean_name("Luật\u00a0Điện lực.pdf") == "Luật\u00a0Điện lực.pdf"
