"""Datasette plugin serving book-finder recommendations."""

from datasette_book_finder.plugin import (
    extra_template_vars,
    prepare_jinja2_environment,
    register_routes,
    startup,
)

__all__ = [
    "extra_template_vars",
    "prepare_jinja2_environment",
    "register_routes",
    "startup",
]
