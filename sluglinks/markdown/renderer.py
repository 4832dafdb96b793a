# sluglinks/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .postprocessors.utils import clear_shared_soup


def render_markdown(text, context=None):
    """
    Render markdown to HTML with pypandoc, then run the postprocessors.

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    context = context or {}

    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    html = apply_postprocessors(html, context)
    clear_shared_soup(context)

    return html
