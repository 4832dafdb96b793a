# sluglinks/markdown/postprocessors/sanitizer.py

from functools import lru_cache

import bleach


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Allowed tags, attributes and protocols for Pandoc's HTML5 output."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "aside",
            "mark",
            "ins",
            "del",
            "sup",  # footnote references
            "sub",
            "q",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            # task lists
            "input",
            "label",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role", "aria-hidden"],
        "a": ["href", "title", "rel", "tabindex"],
        "img": ["src", "alt", "title", "width", "height"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "ol": ["start", "type"],
        "input": ["type", "checked", "disabled"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.

    This is the FIRST post-processor: heading ids survive (``id`` is allowed
    everywhere), while scripts, event handlers and unknown tags coming from
    raw HTML in the markdown source are escaped.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # Escape disallowed tags rather than dropping their text
    )
