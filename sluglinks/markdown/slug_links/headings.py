"""
Heading index for slug link resolution.

Maps heading ids to their rendered text and back, so link references can be
resolved either by id or (optionally) by heading text.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

HEADING_TAG_RE = re.compile(r"^h[1-6]$")


@dataclass
class HeadingIndex:
    id_to_text: Dict[str, str] = field(default_factory=dict)
    text_to_id: Dict[str, str] = field(default_factory=dict)

    def add(self, identifier: str, text: str) -> None:
        self.id_to_text[identifier] = text
        self.text_to_id[text] = identifier


def _heading_id(heading: Tag) -> str:
    """Return the heading's id attribute as a string ("" when absent)."""
    identifier = heading.get("id")
    if isinstance(identifier, list):
        identifier = " ".join(identifier)
    return identifier or ""


def heading_text(heading: Tag, normalize_unicode: bool = False) -> str:
    """
    Concatenate every descendant text node of a heading, in document order.

    Comments and other non-text leaves contribute nothing.
    """
    text = heading.get_text()
    if normalize_unicode:
        text = unicodedata.normalize("NFKC", text)
    return text


def collect_headings(soup: BeautifulSoup, normalize_unicode: bool = False) -> HeadingIndex:
    """
    Build the heading index for one pass over the tree.

    Only h1-h6 elements with a non-empty id are indexed. When two headings
    share an id or a text, the later one wins.
    """
    index = HeadingIndex()
    for heading in soup.find_all(HEADING_TAG_RE):
        identifier = _heading_id(heading)
        if not identifier:
            continue
        index.add(identifier, heading_text(heading, normalize_unicode))

    logger.debug("Indexed %d heading id(s)", len(index.id_to_text))
    return index
