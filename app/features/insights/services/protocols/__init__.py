"""Service protocols for the insights feature."""

from app.features.insights.services.protocols.text_completer import (
    CompletionProviderError,
    TextCompleter,
)

__all__ = ["CompletionProviderError", "TextCompleter"]
