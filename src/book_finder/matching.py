"""
Taste and author matching against the catalog.

Raw user input is normalized into MatchCriteria, then each book is checked
with case-insensitive substring containment:

- taste tokens are matched against the book's genre (any token may match)
- the author filter is matched against the author's full name

An empty token set or an empty author filter means "no filter".
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .catalog import BookRecord

TASTE_SEPARATOR = ","


@dataclass(frozen=True)
class MatchCriteria:
    """Normalized filter built from one request's raw input."""

    taste_tokens: frozenset[str] = field(default_factory=frozenset)
    author_filter: str = ""

    @property
    def is_empty(self) -> bool:
        """True when neither a taste nor an author filter applies."""
        return not self.taste_tokens and not self.author_filter

    def to_dict(self) -> dict:
        return {
            "taste_tokens": sorted(self.taste_tokens),
            "author_filter": self.author_filter,
        }


def parse_taste_tokens(taste_input: str | None) -> frozenset[str]:
    """Split comma-separated taste input into trimmed, lower-cased tokens."""
    if not taste_input:
        return frozenset()
    pieces = (piece.strip().lower() for piece in taste_input.split(TASTE_SEPARATOR))
    return frozenset(piece for piece in pieces if piece)


def normalize_criteria(taste_input: str | None, author_input: str | None) -> MatchCriteria:
    """Build MatchCriteria from raw taste and author strings."""
    return MatchCriteria(
        taste_tokens=parse_taste_tokens(taste_input),
        author_filter=(author_input or "").strip().lower(),
    )


def matches_taste(book: BookRecord, criteria: MatchCriteria) -> bool:
    if not criteria.taste_tokens:
        return True
    genre = book.genre.lower()
    return any(token in genre for token in criteria.taste_tokens)


def matches_author(book: BookRecord, criteria: MatchCriteria) -> bool:
    if not criteria.author_filter:
        return True
    return criteria.author_filter in book.author.lower()


def matches(book: BookRecord, criteria: MatchCriteria) -> bool:
    """Check both the taste and the author condition."""
    return matches_taste(book, criteria) and matches_author(book, criteria)


def filter_catalog(books: Iterable[BookRecord], criteria: MatchCriteria) -> list[BookRecord]:
    """Return the books satisfying the criteria, in catalog order."""
    return [book for book in books if matches(book, criteria)]
