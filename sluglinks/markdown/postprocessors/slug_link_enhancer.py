# sluglinks/markdown/postprocessors/slug_link_enhancer.py
"""
Postprocessor that turns heading references into in-page links.

Authors write ``[{#heading-id}]`` anywhere in running text; once the HTML is
rendered (and headings carry their ids) the reference becomes
``<a href="#heading-id">Heading text</a>``. References that do not match a
heading are left as written.
"""

from ..config import get_slug_link_options
from ..slug_links import slug_link_transform
from .utils import apply_soup_transform


def slug_link_enhancer(html: str, context: dict, **options) -> str:
    """
    Convert heading references in rendered HTML into anchor links.

    Args:
        html: HTML string to process
        context: Context dictionary, used for shared soup caching
        **options: Slug link options overriding the SLUG_LINKS setting
            (pattern, pattern_group_missing, fallback_to_heading_text,
            invalid_slug, maintain_case, normalize_unicode)

    Returns:
        Processed HTML with heading references linked

    Raises:
        ConfigurationError: If the options are invalid
        InvalidSlugError: If invalid_slug is "error" and a reference is invalid
    """
    transform = slug_link_transform(get_slug_link_options(**options))
    return apply_soup_transform(html, context, transform)


def slug_link_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for slug_link_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return slug_link_enhancer(html, context)
