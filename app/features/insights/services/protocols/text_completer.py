"""Protocol for text completion services."""

from typing import Protocol


class CompletionProviderError(Exception):
    """Raised when the completion provider fails or returns no text."""


class TextCompleter(Protocol):
    """Protocol for services that complete a prompt with a language model."""

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Complete a prompt.

        Args:
            prompt: The prompt sent to the model
            max_tokens: Upper bound on the length of the generated answer

        Returns:
            The raw generated text

        Raises:
            CompletionProviderError: If the call fails or the answer has no text
        """
        ...
