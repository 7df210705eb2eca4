"""
Datasette plugin for book-finder: a "Find Your Next Read" page.

- Recommendation form (taste genres + optional author)
- Results / error banner on the same page
- JSON endpoint for scripted access
"""

import logging
from pathlib import Path
from typing import Any

from datasette import Response, hookimpl
from datasette.utils.asgi import Request

from book_finder import __version__
from book_finder.config import PLUGIN_NAME, FinderConfig
from book_finder.service import RecommendationService, build_service

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Plugin Configuration
# -----------------------------------------------------------------------------


def get_plugin_config(datasette) -> FinderConfig:
    """Get plugin configuration from datasette.yaml."""
    config = datasette.plugin_config(PLUGIN_NAME) or {}
    return FinderConfig.from_dict(config)


def get_service(datasette) -> RecommendationService:
    """
    Get the recommendation service for this Datasette instance.

    Built once per instance so the catalog is loaded a single time and the
    random source carries across requests.
    """
    service = getattr(datasette, "_book_finder_service", None)
    if service is None:
        config = get_plugin_config(datasette)
        service = build_service(config)
        datasette._book_finder_service = service
    return service


def get_search_args(request: Request) -> tuple[str, str]:
    """Read taste and author from the query string."""
    return request.args.get("taste", ""), request.args.get("author", "")


# -----------------------------------------------------------------------------
# Template Rendering Helper
# -----------------------------------------------------------------------------


async def render_template(datasette, request, template_name: str, context: dict) -> Response:
    """Render a template with the given context."""
    return Response.html(
        await datasette.render_template(
            template_name,
            {**context, "request": request},
            request=request,
        )
    )


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


async def book_finder_index(request: Request, datasette) -> Response:
    """
    Main book-finder page.

    Without search arguments: show the form.
    With taste/author (or submit) in the query string: show results too.
    """
    service = get_service(datasette)
    taste, author = get_search_args(request)
    searched = any(key in request.args for key in ("taste", "author", "submit"))

    response = None
    if searched:
        response = await service.fetch(taste, author)

    return await render_template(
        datasette,
        request,
        "book_finder.html",
        {
            "taste": taste,
            "author": author,
            "searched": searched,
            "books": response.books if response else [],
            "error": response.error if response else None,
            "genres": service.pipeline.catalog.genres(),
        },
    )


async def book_finder_json(request: Request, datasette) -> Response:
    """JSON API: recommendations for ?taste=...&author=..."""
    service = get_service(datasette)
    taste, author = get_search_args(request)

    response = await service.fetch(taste, author)
    return Response.json(response.to_dict(), status=200 if response.ok else 500)


# -----------------------------------------------------------------------------
# Datasette Hooks
# -----------------------------------------------------------------------------


@hookimpl
def register_routes():
    """Register plugin routes with Datasette."""
    return [
        (r"^/book-finder$", book_finder_index),
        (r"^/book-finder/recommend\.json$", book_finder_json),
    ]


@hookimpl
def extra_template_vars(datasette) -> dict[str, Any]:
    """Provide extra template variables."""
    return {
        "book_finder_version": __version__,
    }


# Register templates directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


@hookimpl
def prepare_jinja2_environment(env, datasette):
    """Add the plugin's templates directory to the Jinja2 environment."""
    from jinja2 import ChoiceLoader, FileSystemLoader

    # Prepend our templates to the loader
    if hasattr(env, "loader"):
        env.loader = ChoiceLoader([FileSystemLoader(str(TEMPLATES_DIR)), env.loader])


@hookimpl
def startup(datasette):
    """
    Run on Datasette startup.

    Loads the configured catalog so a broken catalog file fails the server
    start rather than the first request.
    """
    service = get_service(datasette)
    catalog = service.pipeline.catalog
    logger.info(f"book-finder ready: {len(catalog)} book(s), genres: {', '.join(catalog.genres())}")
