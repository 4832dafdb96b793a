from django.apps import AppConfig


class SlugLinksConfig(AppConfig):
    name = "sluglinks"
    verbose_name = "Heading slug links"

    def ready(self):
        """Fail at startup, not on first render, if SLUG_LINKS is invalid."""
        from .markdown.config import get_slug_link_options
        from .markdown.slug_links import slug_link_transform

        slug_link_transform(get_slug_link_options())
