"""Prompt completion service using LangChain and Google's Gemini model."""

from typing import Any, Callable

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.settings import Settings, get_settings
from app.features.insights.services.protocols import CompletionProviderError

ChatModelFactory = Callable[[int], BaseChatModel]


class LangChainTextCompleter:
    """Completes free-text prompts with a LangChain chat model.

    A chat model is built per call so that the output-length hint of each
    prompt is applied through ``max_output_tokens``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        chat_model_factory: ChatModelFactory | None = None,
    ):
        """Initialize the completer.

        Args:
            settings: Optional settings instance. Defaults to the cached settings.
            chat_model_factory: Optional callable building a chat model for a
                given output token budget. Defaults to Gemini.
        """
        self._settings = settings or get_settings()
        self._chat_model_factory = chat_model_factory or self._build_gemini_model

    def _build_gemini_model(self, max_tokens: int) -> BaseChatModel:
        if not self._settings.google_api_key:
            raise CompletionProviderError("GOOGLE_API_KEY environment variable not set.")

        return ChatGoogleGenerativeAI(
            model=self._settings.completion_model,
            temperature=self._settings.completion_temperature,
            max_output_tokens=max_tokens,
            max_retries=0,
            google_api_key=self._settings.google_api_key,
        )

    async def complete(self, prompt: str, max_tokens: int) -> str:
        try:
            chat_model = self._chat_model_factory(max_tokens)
            message = await chat_model.ainvoke(prompt)
        except CompletionProviderError:
            raise
        except Exception as e:
            # Provider SDKs raise their own exception hierarchies
            raise CompletionProviderError(f"Completion request failed: {e}") from e

        text = _extract_text(message.content)
        if not text.strip():
            raise CompletionProviderError("Completion response contained no text")
        return text


def _extract_text(content: Any) -> str:
    """Flatten chat message content into plain text.

    Content is either a string or a list of string / ``{"type": "text"}`` blocks.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and isinstance(block.get("text"), str):
                parts.append(block["text"])
        return "".join(parts)
    return ""
