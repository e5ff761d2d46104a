"""Prompt relay shared by the insights use cases."""

import logging

from app.core.errors import UpstreamError
from app.features.insights.services.protocols import (
    CompletionProviderError,
    TextCompleter,
)

logger = logging.getLogger(__name__)


async def relay_prompt(
    text_completer: TextCompleter,
    prompt: str,
    max_tokens: int,
    failure_message: str,
) -> str:
    """Send a prompt to the completion provider and return its trimmed answer.

    Raises:
        UpstreamError: With ``failure_message`` if the provider fails
    """
    try:
        text = await text_completer.complete(prompt, max_tokens=max_tokens)
    except CompletionProviderError as e:
        logger.error("%s: %s", failure_message, e)
        raise UpstreamError(failure_message) from e
    return text.strip()
