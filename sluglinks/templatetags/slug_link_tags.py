# sluglinks/templatetags/slug_link_tags.py

from django import template
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from sluglinks.markdown.postprocessors.slug_link_enhancer import slug_link_enhancer
from sluglinks.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="slug_links")
def slug_links_filter(value):
    """
    Link heading references in already-rendered HTML.

    Only values already marked safe are treated as markup; anything else is
    escaped first, like any other template variable.
    """
    return mark_safe(slug_link_enhancer(str(conditional_escape(value)), {}))
