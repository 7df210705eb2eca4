"""
Recommendation pipeline for book-finder.

Each request runs through three steps:
1. Normalize raw taste/author input into MatchCriteria
2. Filter the catalog by those criteria
3. Sample up to max_results books from the matches

The pipeline holds no per-request state and never raises for string input:
an empty selection is a normal outcome.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .catalog import BookRecord, Catalog, load_default_catalog
from .matching import MatchCriteria, filter_catalog, normalize_criteria
from .sampler import DEFAULT_MAX_RESULTS, sample_books

logger = logging.getLogger(__name__)


@dataclass
class RecommendationResult:
    """Outcome of a single recommendation request."""

    criteria: MatchCriteria
    match_count: int = 0
    books: list[BookRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "criteria": self.criteria.to_dict(),
            "match_count": self.match_count,
            "books": [book.to_dict() for book in self.books],
        }


class RecommendationPipeline:
    """Filter-then-sample recommendation over a fixed catalog."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        rng: random.Random | None = None,
    ):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.max_results = max_results
        self._rng = rng or random.Random()

    def matching_books(self, criteria: MatchCriteria) -> list[BookRecord]:
        """All catalog books satisfying the criteria, in catalog order."""
        return filter_catalog(self.catalog, criteria)

    def run(self, taste_input: str | None, author_input: str | None) -> RecommendationResult:
        """Run the full pipeline and return the detailed result."""
        criteria = normalize_criteria(taste_input, author_input)
        matched = self.matching_books(criteria)
        books = sample_books(matched, self.max_results, self._rng)

        logger.debug(
            f"Criteria tastes={sorted(criteria.taste_tokens)} "
            f"author={criteria.author_filter!r}: "
            f"{len(matched)} match(es), returning {len(books)}"
        )

        return RecommendationResult(
            criteria=criteria,
            match_count=len(matched),
            books=books,
        )

    def recommend(self, taste_input: str | None, author_input: str | None) -> list[BookRecord]:
        """Return up to max_results books matching the raw input."""
        return self.run(taste_input, author_input).books


def recommend(taste_input: str | None = "", author_input: str | None = "") -> list[BookRecord]:
    """Recommend up to three books from the bundled catalog."""
    return RecommendationPipeline().recommend(taste_input, author_input)
