"""
Slug validation and conversion for matched link references.
"""

import re

from django.utils.text import slugify

from sluglinks.exceptions import InvalidSlugError

VALID_SLUG_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_SEPARATOR_RE = re.compile(r"[-\s]+")


def is_valid_slug(slug: str) -> bool:
    """Return True if slug only contains ASCII letters, digits, hyphen and underscore."""
    return bool(VALID_SLUG_RE.match(slug))


def _slugify_keep_case(text: str) -> str:
    """
    Slugify text like django's slugify but without lower-casing.

    Each character is folded on its own and upper-cased again when the
    source character was upper case.
    """
    words = []
    for word in _SEPARATOR_RE.split(text):
        folded = []
        for char in word:
            if char == "_":
                folded.append(char)
                continue
            converted = slugify(char)
            folded.append(converted.upper() if char.isupper() else converted)
        if "".join(folded):
            words.append("".join(folded))
    return "-".join(words).strip("-_")


def convert_slug(text: str, maintain_case: bool = False) -> str:
    """Derive an ASCII slug from free text."""
    if maintain_case:
        return _slugify_keep_case(text)
    return slugify(text)


def resolve_slug(slug: str, invalid_slug: str = "convert", maintain_case: bool = False) -> str:
    """
    Validate a raw slug, converting or rejecting it when invalid.

    Args:
        slug: Raw slug captured from the link syntax
        invalid_slug: "convert" to slugify invalid input, "error" to raise
        maintain_case: Preserve letter case during conversion

    Returns:
        The slug unchanged when valid, otherwise its converted form

    Raises:
        InvalidSlugError: If the slug is invalid and invalid_slug is "error"
    """
    if is_valid_slug(slug):
        return slug

    if invalid_slug == "convert":
        return convert_slug(slug, maintain_case=maintain_case)

    raise InvalidSlugError(slug)
