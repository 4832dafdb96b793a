# sluglinks/markdown/postprocessors/__init__.py

from .sanitizer import sanitize_html
from .slug_link_enhancer import slug_link_enhancer_default

POSTPROCESSORS = [
    sanitize_html,  # MUST be first - escapes raw HTML from the markdown source
    slug_link_enhancer_default,  # Link [{#heading-id}] references to their headings
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
