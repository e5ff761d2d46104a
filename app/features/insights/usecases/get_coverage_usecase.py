"""Use case for summarizing ISP coverage at a location."""

import logging

from app.core.errors import PersistenceError
from app.features.catalog.repositories.protocols import IspRepository, RepositoryError
from app.features.insights.dtos import CoverageResponse
from app.features.insights.services.protocols import TextCompleter
from app.features.insights.usecases.relay import relay_prompt

logger = logging.getLogger(__name__)

COVERAGE_MAX_TOKENS = 150


class GetCoverageUseCaseImpl:
    """Implementation of the coverage lookup use case."""

    def __init__(self, repository: IspRepository, text_completer: TextCompleter):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository of stored ISPs
            text_completer: Language model used to summarize coverage
        """
        self.repository = repository
        self.text_completer = text_completer

    async def execute(self, location: str) -> CoverageResponse:
        """Summarize which stored ISPs serve a location.

        Stored ISPs are matched on their coverage area. When none match, a
        fixed placeholder is returned and the provider is not called.

        Raises:
            PersistenceError: If the store cannot be searched
            UpstreamError: If the provider call fails
        """
        try:
            isps = await self.repository.find_by_coverage_area(location)
        except RepositoryError as e:
            logger.exception("Coverage search for %r failed: %s", location, e)
            raise PersistenceError("Failed to fetch coverage data") from e

        if not isps:
            return CoverageResponse(coverage=f"No ISP data found for {location}.")

        listing = "\n".join(
            f"- {isp.name}: {isp.speed:g} Mbps, ${isp.cost:g}/month, covers {isp.coverage_area}"
            for isp in isps
        )
        prompt = (
            f"Summarize internet coverage in {location} for a customer choosing a "
            f"provider. Known ISPs serving the area:\n{listing}"
        )
        coverage = await relay_prompt(
            self.text_completer,
            prompt,
            max_tokens=COVERAGE_MAX_TOKENS,
            failure_message="Failed to fetch coverage data",
        )
        return CoverageResponse(coverage=coverage)
