"""
Book catalog for book-finder.

The catalog is a fixed, ordered collection of book records loaded once at
startup from a versioned JSON data file. Nothing adds, removes or edits
records while the process runs.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0.0"

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.json"


class CatalogError(Exception):
    """Raised when a catalog data file cannot be loaded."""


@dataclass(frozen=True)
class BookRecord:
    """A single book in the catalog."""

    title: str
    author: str
    genre: str
    mood: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "mood": list(self.mood),
            "themes": list(self.themes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookRecord":
        """
        Create a record from a dictionary.

        Raises CatalogError if title, author or genre is missing or blank,
        or if mood or themes is present but not a list.
        """
        if not isinstance(data, dict):
            raise CatalogError(f"Book entry must be an object, got {type(data).__name__}")

        values = {}
        for key in ("title", "author", "genre"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise CatalogError(f"Book entry is missing a {key}: {data!r}")
            values[key] = value.strip()

        tags = {}
        for key in ("mood", "themes"):
            value = data.get(key, [])
            if not isinstance(value, list):
                raise CatalogError(f"Book entry {key} must be a list of tags: {data!r}")
            tags[key] = tuple(str(tag) for tag in value)

        return cls(
            title=values["title"],
            author=values["author"],
            genre=values["genre"],
            mood=tags["mood"],
            themes=tags["themes"],
        )


@dataclass(frozen=True)
class Catalog:
    """An immutable, ordered collection of BookRecord."""

    books: tuple[BookRecord, ...] = ()
    schema_version: str = SCHEMA_VERSION
    source: str | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self):
        return iter(self.books)

    def genres(self) -> list[str]:
        """Distinct genres in catalog order."""
        seen: set[str] = set()
        genres = []
        for book in self.books:
            key = book.genre.lower()
            if key not in seen:
                seen.add(key)
                genres.append(book.genre)
        return genres

    def to_dict(self) -> dict[str, Any]:
        """Convert to the catalog data file format."""
        return {
            "schema_version": self.schema_version,
            "books": [book.to_dict() for book in self.books],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "Catalog":
        """Create a catalog from the data file format."""
        if not isinstance(data, dict):
            raise CatalogError("Catalog data must be an object with a 'books' list")

        books = data.get("books")
        if not isinstance(books, list):
            raise CatalogError("Catalog data must contain a 'books' list")

        return cls(
            books=tuple(BookRecord.from_dict(entry) for entry in books),
            schema_version=data.get("schema_version", SCHEMA_VERSION),
            source=source,
        )

    @classmethod
    def from_json(cls, text: str, source: str | None = None) -> "Catalog":
        """Parse a catalog from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog is not valid JSON: {e}") from e
        return cls.from_dict(data, source=source)

    @classmethod
    def load(cls, path: Path) -> "Catalog":
        """Load a catalog from a JSON data file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Cannot read catalog file {path}: {e}") from e

        catalog = cls.from_json(text, source=str(path))
        logger.info(f"Loaded {len(catalog)} book(s) from {path}")
        return catalog


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """Load the catalog bundled with the package (cached)."""
    return Catalog.load(DEFAULT_CATALOG_PATH)
