"""Unit tests for document ordering and context serialization."""

from datetime import date

import pytest

from legal_chat.core.domain import Message, Speaker
from legal_chat.core.services.context_assembler import (
    ContextAssembler,
    build_context,
    build_system_prompt,
    filter_history,
    order_for_display,
)
from legal_chat.core.services.prompts import NO_DOCUMENTS_PLACEHOLDER

pytestmark = pytest.mark.unit

ROLES = {Speaker.USER: "user", Speaker.ASSISTANT: "model"}


class TestOrderForDisplay:
    """Rank first, then newest effective date, then input order."""

    def test_law_before_circular_even_if_older(self, doc):
        circular = doc("Thông tư 13.pdf", date(2023, 4, 27))
        law = doc("Luật Giáo dục.pdf", date(2019, 6, 14))

        assert order_for_display([circular, law]) == [law, circular]

    def test_tier_two_before_tier_five_regardless_of_dates(self, doc):
        decree = doc("Nghị định 72-2025.pdf", date(2025, 3, 30))
        law = doc("Luật Điện lực.pdf", date(1990, 1, 1))

        assert order_for_display([decree, law])[0] is law

    def test_newer_first_within_rank(self, doc):
        older = doc("Thông tư 16.pdf", date(2014, 7, 15))
        newer = doc("Thông tư 13.pdf", date(2023, 4, 27))

        assert order_for_display([older, newer]) == [newer, older]

    def test_equal_rank_and_date_keep_input_order(self, doc):
        same_day = date(2024, 1, 1)
        first = doc("Thông tư A.pdf", same_day)
        second = doc("Thông tư B.pdf", same_day)

        assert order_for_display([first, second]) == [first, second]
        assert order_for_display([second, first]) == [second, first]

    def test_unranked_documents_go_last(self, doc):
        memo = doc("Công văn 1.pdf", date(2025, 1, 1))
        decision = doc("Quyết định 5 huyện.pdf", date(2000, 1, 1))
        law = doc("Luật Thuế.pdf", date(2000, 1, 1))

        assert order_for_display([memo, decision, law]) == [law, decision, memo]

    def test_empty(self):
        assert order_for_display([]) == []

    def test_does_not_mutate_input(self, doc):
        documents = [doc("Thông tư 13.pdf"), doc("Luật Giáo dục.pdf")]
        snapshot = list(documents)
        order_for_display(documents)
        assert documents == snapshot


class TestBuildContext:
    """Serialized context block."""

    def test_empty_set_yields_placeholder(self):
        assert build_context([]) == NO_DOCUMENTS_PLACEHOLDER

    def test_blocks_carry_index_rank_and_metadata(self, doc):
        law = doc("Luật Giáo dục.pdf", date(2019, 6, 14), "Điều 1. Phạm vi điều chỉnh")
        circular = doc("Thông tư 13.pdf", date(2023, 4, 27), "Điều 9. Giá bán lẻ điện")

        context = build_context([circular, law])

        assert '<document index="1" priority_rank="2">' in context
        assert '<document index="2" priority_rank="8">' in context
        assert "<title>Luật Giáo dục.pdf</title>" in context
        assert "<effective_date>2019-06-14</effective_date>" in context
        assert context.index("Luật Giáo dục.pdf") < context.index("Thông tư 13.pdf")

    def test_content_is_passed_verbatim(self, doc):
        content = "Giá {gia} <b>1.940</b> đồng/kWh\n" * 2000
        context = build_context([doc("Thông tư 13.pdf", content=content)])

        assert content in context

    def test_unranked_documents_report_sentinel(self, doc):
        context = build_context([doc("ghi chú.txt")])
        assert 'priority_rank="99"' in context

    def test_system_prompt_embeds_context(self, doc):
        prompt = build_system_prompt([doc("Luật Giáo dục.pdf", content="Nội dung luật")])
        assert "Nội dung luật" in prompt
        assert "{context}" not in prompt

    def test_system_prompt_without_documents_uses_placeholder(self):
        assert NO_DOCUMENTS_PLACEHOLDER in build_system_prompt([])


class TestFilterHistory:
    """History replayed to the model."""

    def test_failed_messages_are_dropped(self):
        messages = [
            Message(Speaker.USER, "Câu 1"),
            Message(Speaker.ASSISTANT, "Lỗi kết nối", failed=True),
            Message(Speaker.USER, "Câu 2"),
            Message(Speaker.ASSISTANT, "Trả lời 2"),
        ]

        turns = filter_history(messages, ROLES)

        assert [(turn.role, turn.text) for turn in turns] == [
            ("user", "Câu 1"),
            ("user", "Câu 2"),
            ("model", "Trả lời 2"),
        ]

    def test_empty_history(self):
        assert filter_history([], ROLES) == []


def test_assemble_combines_prompt_and_history(doc):
    assembler = ContextAssembler()
    history = [Message(Speaker.USER, "Hỏi"), Message(Speaker.ASSISTANT, "Đáp")]

    prompt = assembler.assemble([doc("Luật Giáo dục.pdf")], history, ROLES)

    assert "Luật Giáo dục.pdf" in prompt.system_prompt
    assert [turn.role for turn in prompt.history] == ["user", "model"]
