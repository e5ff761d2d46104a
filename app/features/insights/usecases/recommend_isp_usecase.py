"""Use case for AI-based ISP recommendations."""

import math
from typing import Any

from app.core.errors import ValidationError
from app.features.insights.dtos import RecommendationResponse, RecommendIspRequest
from app.features.insights.services.protocols import TextCompleter
from app.features.insights.usecases.relay import relay_prompt

RECOMMENDATION_MAX_TOKENS = 50


def _parse_amount(value: Any) -> float | None:
    """Return value as a finite, non-negative number, or None if it is not one."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _format_amount(number: float) -> str:
    return str(int(number)) if number.is_integer() else str(number)


class RecommendIspUseCaseImpl:
    """Implementation of the ISP recommendation use case."""

    def __init__(self, text_completer: TextCompleter):
        self.text_completer = text_completer

    async def execute(self, request: RecommendIspRequest) -> RecommendationResponse:
        """Ask the language model for an ISP matching speed and budget.

        Raises:
            ValidationError: If speed or cost is missing or not a number
            UpstreamError: If the provider call fails
        """
        if request.speed in (None, "") or request.cost in (None, ""):
            raise ValidationError("Speed and cost are required")

        speed = _parse_amount(request.speed)
        cost = _parse_amount(request.cost)
        if speed is None or cost is None:
            raise ValidationError("Invalid speed or cost values")

        prompt = (
            f"Suggest the best ISP with at least {_format_amount(speed)} Mbps speed "
            f"and cost below ${_format_amount(cost)}."
        )
        recommendation = await relay_prompt(
            self.text_completer,
            prompt,
            max_tokens=RECOMMENDATION_MAX_TOKENS,
            failure_message="Failed to get AI recommendation",
        )
        return RecommendationResponse(recommendation=recommendation)
