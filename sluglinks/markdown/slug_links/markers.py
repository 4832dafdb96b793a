"""
Processed markers for the slug link transform.

BeautifulSoup strings compare and hash by value, so "already processed"
state is kept in a side table keyed by node identity. The table lives on
the tree root and shares its lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from bs4 import BeautifulSoup
from bs4.element import PageElement

_MARKERS_ATTR = "_slug_link_markers"


@dataclass
class ProcessedMarkers:
    """Identity-keyed record of what a slug link pass has already handled."""

    root: bool = False
    # id(node) -> node; holding the node keeps its id from being reused
    _nodes: Dict[int, PageElement] = field(default_factory=dict, repr=False)

    def mark(self, node: PageElement) -> None:
        self._nodes[id(node)] = node

    def is_marked(self, node: PageElement) -> bool:
        return self._nodes.get(id(node)) is node

    def __len__(self) -> int:
        return len(self._nodes)


def get_markers(soup: BeautifulSoup) -> ProcessedMarkers:
    """Return the marker table for a tree, creating it on first use."""
    # Tag.__getattr__ treats unknown names as child lookups, so go through __dict__
    markers = soup.__dict__.get(_MARKERS_ATTR)
    if markers is None:
        markers = ProcessedMarkers()
        soup.__dict__[_MARKERS_ATTR] = markers
    return markers


def is_tree_processed(soup: BeautifulSoup) -> bool:
    markers = soup.__dict__.get(_MARKERS_ATTR)
    return markers is not None and markers.root
