"""Tests for link construction and text node rewriting."""

import pytest
from bs4 import Tag

from sluglinks.markdown.slug_links.headings import HeadingIndex
from sluglinks.markdown.slug_links.markers import get_markers
from sluglinks.markdown.slug_links.patterns import SlugMatch
from sluglinks.markdown.slug_links.rewriter import build_fragments, create_link, rewrite_text_node


@pytest.fixture
def headings():
    index = HeadingIndex()
    index.add("intro", "Introduction")
    index.add("setup", "Getting Started")
    return index


@pytest.mark.unit
class TestCreateLink:
    def test_resolves_by_id(self, make_soup, headings):
        link = create_link(make_soup(""), "intro", headings)

        assert str(link) == '<a href="#intro">Introduction</a>'

    def test_unknown_id_without_fallback(self, make_soup, headings):
        assert create_link(make_soup(""), "Introduction", headings) is None

    def test_fallback_to_heading_text(self, make_soup, headings):
        link = create_link(make_soup(""), "Getting Started", headings, fallback_to_heading_text=True)

        assert str(link) == '<a href="#setup">Getting Started</a>'

    def test_id_wins_over_heading_text(self, make_soup, headings):
        headings.add("Other", "Something else")
        headings.add("other-id", "Other")

        link = create_link(make_soup(""), "Other", headings, fallback_to_heading_text=True)

        assert str(link) == '<a href="#Other">Something else</a>'

    def test_no_match_with_fallback(self, make_soup, headings):
        assert create_link(make_soup(""), "missing", headings, fallback_to_heading_text=True) is None


@pytest.mark.unit
class TestBuildFragments:
    def test_interleaves_text_and_links(self, make_soup, headings):
        text = "See [{#intro}] and [{#setup}]."
        matches = [
            SlugMatch("[{#intro}]", "intro", 4, 14),
            SlugMatch("[{#setup}]", "setup", 19, 29),
        ]

        fragments = build_fragments(make_soup(""), text, matches, headings)

        assert [str(f) for f in fragments] == [
            "See ",
            '<a href="#intro">Introduction</a>',
            " and ",
            '<a href="#setup">Getting Started</a>',
            ".",
        ]
        assert isinstance(fragments[1], Tag)

    def test_unresolved_reference_is_kept_verbatim(self, make_soup, headings):
        text = "Go to [{#nope}] now"
        matches = [SlugMatch("[{#nope}]", "nope", 6, 15)]

        assert build_fragments(make_soup(""), text, matches, headings) == [text]

    def test_zero_width_matches_add_no_empty_fragments(self, make_soup, headings):
        matches = [SlugMatch("", "", i, i) for i in range(4)]

        assert build_fragments(make_soup(""), "abc", matches, headings) == ["abc"]


@pytest.mark.unit
class TestRewriteTextNode:
    def test_splices_fragments_into_parent(self, make_soup, headings):
        soup = make_soup("<p>Read [{#intro}] first</p>")
        node = soup.p.string
        markers = get_markers(soup)

        changed = rewrite_text_node(soup, node, [SlugMatch("[{#intro}]", "intro", 5, 15)], headings, markers)

        assert changed
        assert str(soup) == '<p>Read <a href="#intro">Introduction</a> first</p>'
        assert node.parent is None
        assert all(markers.is_marked(child) for child in soup.p.contents)
        assert markers.is_marked(soup.a.string)

    def test_unchanged_node_is_marked_in_place(self, make_soup, headings):
        soup = make_soup("<p>[{#nope}]</p>")
        node = soup.p.string
        markers = get_markers(soup)

        changed = rewrite_text_node(soup, node, [SlugMatch("[{#nope}]", "nope", 0, 9)], headings, markers)

        assert not changed
        assert soup.p.string is node
        assert markers.is_marked(node)
        assert str(soup) == "<p>[{#nope}]</p>"
