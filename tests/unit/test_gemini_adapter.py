"""Unit tests for the Gemini chat adapter (SDK client mocked)."""

from unittest.mock import MagicMock

import pytest
from google.genai import errors

from legal_chat.adapters.outbound.llm.gemini_adapter import GEMINI_ROLES, GeminiChatAdapter
from legal_chat.core.domain import HistoryTurn, Speaker
from legal_chat.core.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
)
from legal_chat.core.services.prompts import EMPTY_RESPONSE_TEXT

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.chats.create.return_value.send_message.return_value.text = "Trả lời"
    return client


@pytest.fixture
def adapter(mock_client):
    adapter = GeminiChatAdapter(api_key="test-key", model="gemini-test", temperature=0.1)
    adapter._client = mock_client
    return adapter


def _api_error(code: int, message: str) -> errors.APIError:
    return errors.ClientError(code, {"error": {"code": code, "message": message}})


def test_roles_use_gemini_vocabulary():
    assert GEMINI_ROLES == {Speaker.USER: "user", Speaker.ASSISTANT: "model"}
    assert GeminiChatAdapter.roles is GEMINI_ROLES


def test_complete_sends_system_prompt_history_and_question(adapter, mock_client):
    history = [HistoryTurn("user", "Hỏi 1"), HistoryTurn("model", "Đáp 1")]

    answer = adapter.complete("SYSTEM", history, "Hỏi 2")

    assert answer == "Trả lời"
    kwargs = mock_client.chats.create.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert kwargs["config"].system_instruction == "SYSTEM"
    assert kwargs["config"].temperature == 0.1
    assert [(c.role, c.parts[0].text) for c in kwargs["history"]] == [
        ("user", "Hỏi 1"),
        ("model", "Đáp 1"),
    ]
    mock_client.chats.create.return_value.send_message.assert_called_once_with("Hỏi 2")


def test_empty_response_text_is_replaced(adapter, mock_client):
    mock_client.chats.create.return_value.send_message.return_value.text = None
    assert adapter.complete("SYSTEM", [], "Hỏi") == EMPTY_RESPONSE_TEXT


def test_quota_error_maps_to_rate_limit(adapter, mock_client):
    mock_client.chats.create.return_value.send_message.side_effect = _api_error(
        429, "Resource exhausted"
    )

    with pytest.raises(LLMRateLimitError) as exc_info:
        adapter.complete("SYSTEM", [], "Hỏi")

    assert isinstance(exc_info.value.cause, errors.APIError)
    assert exc_info.value.extra_context == {"model": "gemini-test", "history_turns": 0}


def test_other_api_error_maps_to_generation_error(adapter, mock_client):
    mock_client.chats.create.side_effect = _api_error(400, "Request too large")

    with pytest.raises(LLMGenerationError, match="400"):
        adapter.complete("SYSTEM", [], "Hỏi")


def test_unexpected_error_maps_to_connection_error(adapter, mock_client):
    mock_client.chats.create.return_value.send_message.side_effect = OSError("timed out")

    with pytest.raises(LLMConnectionError) as exc_info:
        adapter.complete("SYSTEM", [], "Hỏi")

    assert isinstance(exc_info.value.cause, OSError)
