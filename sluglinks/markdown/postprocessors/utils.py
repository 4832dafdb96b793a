"""Shared-soup helpers for HTML postprocessors."""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup

_SOUP_KEY = "__sluglinks_soup"
_SOURCE_KEY = "__sluglinks_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return the parsed tree for html, reusing the one cached in context.

    Slug link processed markers live on the parsed tree, so keeping a single
    tree per rendering context lets a repeated pass over unchanged HTML be
    recognised and skipped. The cache is invalidated whenever the HTML
    string differs from what was last parsed or serialised.
    """
    soup = context.get(_SOUP_KEY)
    if soup is None or context.get(_SOURCE_KEY) != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SOUP_KEY] = soup
        context[_SOURCE_KEY] = html
    return soup


def apply_soup_transform(
    html: str, context: dict, transform: Callable[[BeautifulSoup], BeautifulSoup]
) -> str:
    """Run a tree transform over the shared soup and serialise the result."""
    soup = transform(get_shared_soup(html, context))
    html = str(soup)
    context[_SOUP_KEY] = soup
    context[_SOURCE_KEY] = html
    return html


def clear_shared_soup(context: dict) -> None:
    """Remove any cached soup information from the context."""
    context.pop(_SOUP_KEY, None)
    context.pop(_SOURCE_KEY, None)
