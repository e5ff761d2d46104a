"""Use case for AI speed test guidance."""

from app.features.insights.dtos import SpeedTestResponse
from app.features.insights.services.protocols import TextCompleter
from app.features.insights.usecases.relay import relay_prompt

SPEED_TEST_MAX_TOKENS = 150

SPEED_TEST_PROMPT = (
    "Explain how to run a reliable home internet speed test and how to read "
    "its download, upload and ping results."
)


class GetSpeedTestUseCaseImpl:
    """Implementation of the speed test guidance use case."""

    def __init__(self, text_completer: TextCompleter):
        self.text_completer = text_completer

    async def execute(self) -> SpeedTestResponse:
        ai_speed_test = await relay_prompt(
            self.text_completer,
            SPEED_TEST_PROMPT,
            max_tokens=SPEED_TEST_MAX_TOKENS,
            failure_message="Failed to fetch speed test data",
        )
        return SpeedTestResponse(ai_speed_test=ai_speed_test)
