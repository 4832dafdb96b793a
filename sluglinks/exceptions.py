"""
Exceptions raised by the heading slug link transform.
"""

from django.core.exceptions import ImproperlyConfigured


class SlugLinkError(Exception):
    """Base class for slug link errors."""


class ConfigurationError(SlugLinkError, ImproperlyConfigured):
    """
    Raised while building a transform from invalid options.

    Subclasses Django's ImproperlyConfigured so a bad SLUG_LINKS setting
    surfaces the same way as any other misconfigured setting.
    """


class InvalidSlugError(SlugLinkError, ValueError):
    """Raised during a pass when a matched slug fails validation."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"invalid slug: {slug}")
