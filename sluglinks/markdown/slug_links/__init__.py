from .headings import HeadingIndex, collect_headings
from .markers import ProcessedMarkers, get_markers, is_tree_processed
from .options import DEFAULT_PATTERN, SlugLinkOptions
from .patterns import SlugMatch, ensure_capture_group, find_all_matches
from .rewriter import build_fragments, create_link, rewrite_text_node
from .slugs import convert_slug, is_valid_slug, resolve_slug
from .transform import SlugLinkTransform, slug_link_transform

__all__ = [
    "DEFAULT_PATTERN",
    "HeadingIndex",
    "ProcessedMarkers",
    "SlugLinkOptions",
    "SlugLinkTransform",
    "SlugMatch",
    "build_fragments",
    "collect_headings",
    "convert_slug",
    "create_link",
    "ensure_capture_group",
    "find_all_matches",
    "get_markers",
    "is_tree_processed",
    "is_valid_slug",
    "resolve_slug",
    "rewrite_text_node",
    "slug_link_transform",
]
