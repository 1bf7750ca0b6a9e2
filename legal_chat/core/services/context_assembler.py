"""Ordering and serialization of grounding documents into the system prompt."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ..domain import AssembledPrompt, HistoryTurn, LegalDocument, Message, Speaker
from .prompts import LEGAL_SYSTEM_PROMPT, NO_DOCUMENTS_PLACEHOLDER
from .rank_classifier import classify

DOCUMENT_TEMPLATE = """
<document index="{index}" priority_rank="{rank}">
<meta>
  <title>{name}</title>
  <effective_date>{effective_date}</effective_date>
</meta>
<content>
{content}
</content>
</document>
"""


def display_key(document: LegalDocument) -> tuple[int, int]:
    """Sort key: rank ascending, then effective date newest first."""
    return classify(document.name), -document.effective_date.toordinal()


def order_for_display(documents: Iterable[LegalDocument]) -> list[LegalDocument]:
    """Documents by legal priority.

    ``sorted`` is stable, so documents with equal rank and effective date keep
    their input order.
    """
    return sorted(documents, key=display_key)


def render_document(index: int, document: LegalDocument) -> str:
    """One delimited document block; content is passed through verbatim."""
    # str.format does not re-scan substituted values, so braces in content are safe
    return DOCUMENT_TEMPLATE.format(
        index=index,
        rank=classify(document.name),
        name=document.name,
        effective_date=document.effective_date.isoformat(),
        content=document.content,
    )


def build_context(documents: Iterable[LegalDocument]) -> str:
    """Serialize documents in display order into one context block.

    Returns:
        Concatenated document blocks, or ``NO_DOCUMENTS_PLACEHOLDER`` when
        there are no documents.
    """
    ordered = order_for_display(documents)
    if not ordered:
        return NO_DOCUMENTS_PLACEHOLDER
    return "\n".join(render_document(index, doc) for index, doc in enumerate(ordered, start=1))


def build_system_prompt(documents: Iterable[LegalDocument]) -> str:
    """Embed the context block in the answer-policy template."""
    return LEGAL_SYSTEM_PROMPT.format(context=build_context(documents))


def filter_history(
    messages: Sequence[Message], roles: Mapping[Speaker, str]
) -> list[HistoryTurn]:
    """Messages eligible for replay, in the model's role vocabulary.

    Failed messages are dropped; the rest keep their chronological order.
    """
    return [
        HistoryTurn(role=roles[message.speaker], text=message.text)
        for message in messages
        if not message.failed
    ]


class ContextAssembler:
    """Combine the document set and conversation history for one model call."""

    def assemble(
        self,
        documents: Iterable[LegalDocument],
        history: Sequence[Message],
        roles: Mapping[Speaker, str],
    ) -> AssembledPrompt:
        return AssembledPrompt(
            system_prompt=build_system_prompt(documents),
            history=filter_history(history, roles),
        )
