"""Link ``[{#heading-id}]`` references in rendered HTML to their headings."""

from .exceptions import ConfigurationError, InvalidSlugError, SlugLinkError

__all__ = ("ConfigurationError", "InvalidSlugError", "SlugLinkError")
