from typing import Any

from django.conf import settings

from .slug_links import SlugLinkOptions


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Heading ids come from Pandoc itself: ``auto_identifiers`` derives them
    from heading text and ``header_attributes`` lets authors set them
    explicitly with ``# Heading {#custom-id}``. The slug link postprocessor
    only resolves references against whatever ids end up in the HTML.
    """
    return {
        "extra_args": [
            "--from=markdown+auto_identifiers+header_attributes+pipe_tables+footnotes+fenced_code_blocks+raw_html+smart",
            "--mathjax",
        ],
        "filters": [],
    }


def get_slug_link_options(**overrides: Any) -> SlugLinkOptions:
    """
    Site-wide slug link options, with call-site overrides applied on top.

    Defaults come from the optional ``SLUG_LINKS`` Django setting, e.g.::

        SLUG_LINKS = {
            "fallback_to_heading_text": True,
            "invalid_slug": "error",
        }

    Settings are only consulted when Django has been configured, so the
    transform is usable outside a Django project as well.
    """
    configured = getattr(settings, "SLUG_LINKS", None) if settings.configured else None
    return SlugLinkOptions.from_mapping(configured, **overrides)
