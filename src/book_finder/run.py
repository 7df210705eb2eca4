"""
CLI runner for book-finder.

Usage:
    python -m book_finder.run [OPTIONS]

    # Recommend mysteries and thrillers
    python -m book_finder.run --taste "Mystery, Thriller"

    # Books by a preferred author, as JSON
    python -m book_finder.run --author "austen" --json

    # Show the genres in the catalog
    python -m book_finder.run --list-genres
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .catalog import Catalog, CatalogError
from .config import FinderConfig
from .service import RecommendationResponse, build_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("book-finder")


def format_response(response: RecommendationResponse) -> str:
    """Render a response as plain text."""
    if not response.ok:
        return f"Error: {response.error}"
    if not response.books:
        return "No matching books found."

    lines = ["We Recommend:", ""]
    for book in response.books:
        lines.append(book.title)
        lines.append(f"  By {book.author}")
        lines.append(f"  Genre: {book.genre}")
        lines.append("")
    return "\n".join(lines).rstrip()


async def find_books(
    config: FinderConfig, catalog: Catalog, taste: str, author: str
) -> RecommendationResponse:
    """Run one recommendation request through the service."""
    service = build_service(config, catalog)
    return await service.fetch(taste, author)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="book-finder: Find your next read",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Genres are comma-separated and matched case-insensitively
    python -m book_finder.run --taste "sci, fantasy"

    # Filter by author only
    python -m book_finder.run --author "jane austen"

    # Use a different catalog file
    python -m book_finder.run --catalog my_books.json --taste memoir
        """,
    )

    parser.add_argument(
        "--taste",
        type=str,
        default="",
        help="Comma-separated genres, e.g. 'Mystery, Romance, Sci-Fi'",
    )
    parser.add_argument(
        "--author",
        type=str,
        default="",
        help="Preferred author (optional, partial names match)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("datasette.yaml"),
        help="Path to config file (default: datasette.yaml)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Override catalog file from config",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random selection for reproducible output",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the simulated request delay",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the response as JSON",
    )
    parser.add_argument(
        "--list-genres",
        action="store_true",
        help="List the genres in the catalog and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Load config
    config = FinderConfig.from_yaml(args.config)
    if args.catalog:
        config.catalog_path = args.catalog
    if args.seed is not None:
        config.seed = args.seed
    if args.no_delay:
        config.service.simulated_delay_seconds = 0.0

    logger.debug(f"Config: {config.to_dict()}")

    try:
        catalog = config.get_catalog()
    except CatalogError as e:
        logger.error(f"Could not load catalog: {e}")
        return 1

    if args.list_genres:
        for genre in catalog.genres():
            print(genre)
        return 0

    response = asyncio.run(find_books(config, catalog, args.taste, args.author))

    if args.json:
        print(json.dumps(response.to_dict(), indent=2))
    elif response.ok:
        print(format_response(response))
    else:
        print(format_response(response), file=sys.stderr)

    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
