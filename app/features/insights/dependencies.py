"""FastAPI dependencies for the insights routes."""

from app.features.insights.services.langchain_text_completer import (
    LangChainTextCompleter,
)
from app.features.insights.services.protocols import TextCompleter

_text_completer: LangChainTextCompleter | None = None


async def get_text_completer() -> TextCompleter:
    """Get or create the text completer singleton."""
    global _text_completer
    if _text_completer is None:
        _text_completer = LangChainTextCompleter()
    return _text_completer
