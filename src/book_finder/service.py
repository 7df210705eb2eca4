"""
Request handling around the recommendation pipeline.

Front ends (the CLI and the Datasette plugin) call RecommendationService
rather than the pipeline directly. The service waits for a configurable
simulated delay, may inject a failure, and turns any exception into a
user-visible error message instead of letting it escape.
"""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .catalog import BookRecord, Catalog
from .config import FinderConfig, ServiceConfig
from .pipeline import RecommendationPipeline

logger = logging.getLogger(__name__)


class SimulatedFailure(Exception):
    """Raised by the service's error injection."""


@dataclass
class RecommendationResponse:
    """What a front end renders: books, or an error message."""

    books: list[BookRecord] = field(default_factory=list)
    error: str | None = None
    match_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "ok": self.ok,
            "books": [book.to_dict() for book in self.books],
            "match_count": self.match_count,
            "error": self.error,
        }


class RecommendationService:
    """Async wrapper that simulates latency and maps failures to messages."""

    def __init__(
        self,
        pipeline: RecommendationPipeline,
        config: ServiceConfig | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.pipeline = pipeline
        self.config = config or ServiceConfig()
        self._rng = rng or random.Random()
        self._sleep = sleep

    async def _simulate_latency(self) -> None:
        if self.config.simulated_delay_seconds > 0:
            await self._sleep(self.config.simulated_delay_seconds)
        if self.config.failure_rate > 0 and self._rng.random() < self.config.failure_rate:
            raise SimulatedFailure(self.config.error_message)

    async def fetch(self, taste_input: str | None, author_input: str | None) -> RecommendationResponse:
        """
        Fetch recommendations for raw taste/author input.

        Never raises: failures come back as a response with ``error`` set
        and no books.
        """
        try:
            await self._simulate_latency()
            result = self.pipeline.run(taste_input, author_input)
        except Exception as e:
            logger.exception("Fetching recommendations failed")
            return RecommendationResponse(error=str(e) or self.config.error_message)

        return RecommendationResponse(books=result.books, match_count=result.match_count)


def build_service(config: FinderConfig, catalog: Catalog | None = None) -> RecommendationService:
    """
    Create a service and its pipeline from configuration.

    The service's random source is seeded from the pipeline's, so one
    configured seed fixes both while their streams differ.
    """
    rng = config.make_rng()
    return RecommendationService(
        config.build_pipeline(catalog, rng=rng),
        config.service,
        rng=random.Random(rng.random()),
    )
