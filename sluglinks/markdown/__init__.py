from .renderer import render_markdown
from .slug_links import SlugLinkOptions, slug_link_transform

__all__ = ["SlugLinkOptions", "render_markdown", "slug_link_transform"]
