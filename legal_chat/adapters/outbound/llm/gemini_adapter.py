"""Google Gemini chat adapter implementing the chat model port."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ....core.domain import HistoryTurn, Speaker
from ....core.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    MissingAPIKeyError,
)
from ....core.services.prompts import EMPTY_RESPONSE_TEXT

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

GEMINI_ROLES: dict[Speaker, str] = {
    Speaker.USER: "user",
    Speaker.ASSISTANT: "model",
}


class GeminiChatAdapter:
    """Chat completion through the google-genai SDK.

    Each call opens a fresh chat seeded with the system instruction and the
    replayed history, then sends the question. There is no retry: a failing
    call surfaces once as an ``LLMError``.
    """

    roles = GEMINI_ROLES

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.1,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model: Gemini model name.
            temperature: Sampling temperature; kept low for factual answers.
        """
        self.api_key = api_key
        self.model_name = model
        self.temperature = temperature
        self._client: genai.Client | None = None

    def _get_client(self) -> "genai.Client":
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Get one at https://aistudio.google.com/ "
                    "and set GOOGLE_API_KEY in your .env file."
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def complete(self, system_prompt: str, history: list[HistoryTurn], question: str) -> str:
        """Answer ``question`` given the system prompt and prior turns.

        Args:
            system_prompt: Instruction template with the embedded documents.
            history: Replayed turns, roles already in Gemini vocabulary.
            question: The new user question.

        Returns:
            Model answer text.

        Raises:
            MissingAPIKeyError: If no API key is configured.
            LLMRateLimitError: If the provider reports quota exhaustion.
            LLMGenerationError: If the provider rejects the request.
            LLMConnectionError: If the provider cannot be reached.
        """
        from google.genai import errors, types

        client = self._get_client()
        contents = [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)]) for turn in history
        ]
        context = {"model": self.model_name, "history_turns": len(history)}

        try:
            chat = client.chats.create(
                model=self.model_name,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=self.temperature,
                ),
                history=contents,
            )
            response = chat.send_message(question)
        except errors.APIError as exc:
            if exc.code == 429:
                raise LLMRateLimitError(
                    "Gemini quota exceeded. Please wait a moment and try again.",
                    cause=exc,
                    context=context,
                ) from exc
            raise LLMGenerationError(
                f"Gemini API error ({exc.code}): {exc.message or exc}",
                cause=exc,
                context=context,
            ) from exc
        except Exception as exc:
            raise LLMConnectionError(
                f"Không thể kết nối tới Gemini API: {exc}",
                cause=exc,
                context=context,
            ) from exc

        return response.text or EMPTY_RESPONSE_TEXT
