"""
Heading slug link transform.

Rewrites link syntax such as ``[{#installation}]`` found in text into
``<a href="#installation">Installation</a>`` where a heading with that id
exists. A pass runs in four steps:

1. Unvisited: if the tree is already marked as processed, stop.
2. Indexed: collect heading id <-> text mappings.
3. Rewriting: collect candidate text nodes, then rewrite them. Collection
   finishes before any node is replaced, so the traversal is never
   invalidated.
4. Done: mark the tree as processed.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from bs4 import BeautifulSoup, NavigableString
from bs4.element import PreformattedString, Script, Stylesheet

from .headings import collect_headings
from .markers import ProcessedMarkers, get_markers, is_tree_processed
from .options import SlugLinkOptions
from .patterns import ensure_capture_group, find_all_matches
from .rewriter import rewrite_text_node

logger = logging.getLogger(__name__)

# Comments, CDATA, doctypes and script/style bodies are not document text
_NON_TEXT_STRINGS = (PreformattedString, Script, Stylesheet)


def is_text_node(element) -> bool:
    return isinstance(element, NavigableString) and not isinstance(element, _NON_TEXT_STRINGS)


def _should_skip(node: NavigableString, markers: ProcessedMarkers) -> bool:
    parent = node.parent
    return markers.is_marked(node) or (parent is not None and parent.name == "a") or not str(node)


class SlugLinkTransform:
    """
    Callable tree transform converting link syntax into heading links.

    The pattern is checked once, when the transform is built, so a bad
    configuration fails before any document is touched.
    """

    def __init__(self, options: SlugLinkOptions):
        self.options = options
        self.pattern = ensure_capture_group(options.pattern, options.pattern_group_missing)

    def __call__(self, soup: BeautifulSoup) -> BeautifulSoup:
        if is_tree_processed(soup):
            logger.debug("Tree already processed, skipping slug link pass")
            return soup

        markers = get_markers(soup)
        headings = collect_headings(soup, normalize_unicode=self.options.normalize_unicode)

        pending = self._collect_text_nodes(soup, markers)
        rewritten = 0
        for node in pending:
            matches = find_all_matches(
                str(node),
                self.pattern,
                normalize_unicode=self.options.normalize_unicode,
                invalid_slug=self.options.invalid_slug,
                maintain_case=self.options.maintain_case,
            )
            if rewrite_text_node(
                soup,
                node,
                matches,
                headings,
                markers,
                fallback_to_heading_text=self.options.fallback_to_heading_text,
            ):
                rewritten += 1

        markers.root = True
        logger.debug("Slug link pass rewrote %d of %d candidate text node(s)", rewritten, len(pending))
        return soup

    def _collect_text_nodes(self, soup: BeautifulSoup, markers: ProcessedMarkers) -> List[NavigableString]:
        pending = []
        for element in soup.descendants:
            if not is_text_node(element) or _should_skip(element, markers):
                continue
            # Cheap existence check before the full scan
            if self.pattern.search(str(element)):
                pending.append(element)
        return pending


def slug_link_transform(
    options: Optional[Mapping[str, Any] | SlugLinkOptions] = None, **overrides: Any
) -> SlugLinkTransform:
    """
    Build a slug link transform.

    Args:
        options: SlugLinkOptions instance, or a mapping of option names
        **overrides: Individual option values that take precedence

    Returns:
        A callable taking a BeautifulSoup tree, mutating it in place and
        returning it

    Raises:
        ConfigurationError: If the options or the pattern are invalid
    """
    if not isinstance(options, SlugLinkOptions):
        options = SlugLinkOptions.from_mapping(options, **overrides)
    elif overrides:
        options = SlugLinkOptions.from_mapping(vars(options), **overrides)
    return SlugLinkTransform(options)
