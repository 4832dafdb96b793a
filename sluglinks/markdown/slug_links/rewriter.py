"""
Rewrites a text node's link references into anchor elements.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from .headings import HeadingIndex
from .markers import ProcessedMarkers
from .patterns import SlugMatch

logger = logging.getLogger(__name__)

Fragment = Union[str, Tag]


def create_link(
    soup: BeautifulSoup,
    slug: str,
    headings: HeadingIndex,
    fallback_to_heading_text: bool = False,
) -> Optional[Tag]:
    """
    Build an <a href="#id"> link for a resolved slug.

    The slug is looked up as a heading id first; the link label is then the
    heading text. With fallback_to_heading_text the slug is also tried as
    heading text, in which case the slug itself becomes the label.

    Returns:
        The anchor tag, or None when no heading matches
    """
    identifier = slug
    label = headings.id_to_text.get(slug)

    if not label and fallback_to_heading_text:
        identifier = headings.text_to_id.get(slug)
        label = slug

    if not (label and identifier):
        return None

    link = soup.new_tag("a", href=f"#{identifier}")
    link.string = label
    return link


def build_fragments(
    soup: BeautifulSoup,
    text: str,
    matches: Sequence[SlugMatch],
    headings: HeadingIndex,
    fallback_to_heading_text: bool = False,
) -> List[Fragment]:
    """
    Split text into interleaved plain strings and link tags.

    Unresolved references are kept verbatim. Adjacent plain strings are
    merged and empty ones dropped.
    """
    fragments: List[Fragment] = []

    def add_text(value: str) -> None:
        if not value:
            return
        if fragments and isinstance(fragments[-1], str):
            fragments[-1] += value
        else:
            fragments.append(value)

    last_end = 0
    for match in matches:
        if match.start > last_end:
            add_text(text[last_end:match.start])

        link = create_link(soup, match.slug, headings, fallback_to_heading_text)
        if link is None:
            logger.debug("No heading found for link reference %r", match.raw)
            add_text(match.raw)
        else:
            fragments.append(link)

        last_end = match.start + len(match.raw)

    if last_end < len(text):
        add_text(text[last_end:])

    return fragments


def rewrite_text_node(
    soup: BeautifulSoup,
    node: NavigableString,
    matches: Sequence[SlugMatch],
    headings: HeadingIndex,
    markers: ProcessedMarkers,
    fallback_to_heading_text: bool = False,
) -> bool:
    """
    Replace a text node with its rewritten fragments.

    Every inserted node is marked as processed. If nothing changes, the
    original node is marked instead and the tree is left alone.

    Returns:
        True if the tree was modified
    """
    text = str(node)
    fragments = build_fragments(soup, text, matches, headings, fallback_to_heading_text)

    if len(fragments) == 1 and isinstance(fragments[0], str) and fragments[0] == text:
        markers.mark(node)
        return False

    replacements = []
    for fragment in fragments:
        if isinstance(fragment, str):
            fragment = soup.new_string(fragment)
        else:
            markers.mark(fragment.string)
        markers.mark(fragment)
        replacements.append(fragment)

    node.replace_with(*replacements)
    return True
