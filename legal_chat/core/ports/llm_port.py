"""Chat model port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from ..domain import HistoryTurn, Speaker


class ChatModelPort(Protocol):
    """Abstract interface for a grounded chat completion.

    ``roles`` maps each speaker to the role name the provider expects in
    replayed history.
    """

    roles: Mapping[Speaker, str]

    def complete(
        self, system_prompt: str, history: list[HistoryTurn], question: str
    ) -> str:  # pragma: no cover - protocol
        ...
