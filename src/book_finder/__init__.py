"""
book-finder: Find your next read.

Matches a reader's taste (genre keywords) and optional author preference
against a fixed book catalog and returns a small random selection.
"""

from .catalog import BookRecord, Catalog, CatalogError
from .pipeline import RecommendationPipeline, recommend

__version__ = "0.1.0"

__all__ = [
    "BookRecord",
    "Catalog",
    "CatalogError",
    "RecommendationPipeline",
    "recommend",
]
