"""Shared pytest fixtures for book-finder tests."""

import json
import random

import pytest
from datasette.app import Datasette

from book_finder.catalog import BookRecord, Catalog, load_default_catalog


@pytest.fixture
def catalog() -> Catalog:
    """The catalog bundled with the package."""
    return load_default_catalog()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so sampled output is reproducible."""
    return random.Random(1234)


@pytest.fixture
def small_catalog() -> Catalog:
    """A hand-built catalog for filter tests that should not depend on bundled data."""
    return Catalog(
        books=(
            BookRecord("Dune", "Frank Herbert", "Science Fiction", ("epic",), ("power",)),
            BookRecord("Emma", "Jane Austen", "Romance", ("witty",), ("society",)),
            BookRecord("Persuasion", "Jane Austen", "Romance", ("wistful",), ("love",)),
            BookRecord("Gone Girl", "Gillian Flynn", "Thriller", ("dark",), ("marriage",)),
        )
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Write a two-book catalog to disk and return its path."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "schema_version": "1.0.0",
                "books": [
                    {
                        "title": "The Hobbit",
                        "author": "J.R.R. Tolkien",
                        "genre": "Fantasy",
                        "mood": ["adventurous"],
                        "themes": ["courage"],
                    },
                    {
                        "title": "Rebecca",
                        "author": "Daphne du Maurier",
                        "genre": "Gothic Mystery",
                        "mood": ["brooding"],
                        "themes": ["jealousy"],
                    },
                ],
            }
        )
    )
    return path


@pytest.fixture
def plugin_config() -> dict:
    """Plugin config with no artificial delay and a fixed seed."""
    return {
        "seed": 7,
        "service": {"simulated_delay_seconds": 0},
    }


@pytest.fixture
def datasette(plugin_config):
    """Create a Datasette instance with the plugin configured.

    Uses config= (not metadata=) for Datasette v1 compatibility.
    """
    return Datasette(
        memory=True,
        config={
            "plugins": {
                "datasette-book-finder": plugin_config,
            },
        },
    )
