"""
Link syntax pattern handling: capture group normalisation and match scanning.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import List, Union

from sluglinks.exceptions import ConfigurationError

from .slugs import resolve_slug

# Global inline flags such as (?i) or (?ms) must stay at the very start of a
# pattern, so they are lifted off before wrapping in a capture group.
_LEADING_FLAGS_RE = re.compile(r"^(?:\(\?[aiLmsux]+\))+")


@dataclass(frozen=True)
class SlugMatch:
    """A single link reference found in a text node."""

    raw: str
    slug: str
    start: int
    end: int


def compile_pattern(pattern: Union[str, "re.Pattern[str]"]) -> "re.Pattern[str]":
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid link pattern {pattern!r}: {e}") from e


def ensure_capture_group(
    pattern: Union[str, "re.Pattern[str]"], pattern_group_missing: str = "wrap"
) -> "re.Pattern[str]":
    """
    Make sure the link pattern exposes a capture group for the slug.

    Args:
        pattern: Link syntax regex, as a string or compiled pattern
        pattern_group_missing: "wrap" to wrap a group-less pattern in one
            capture group, "error" to reject it

    Returns:
        A compiled pattern with at least one capture group

    Raises:
        ConfigurationError: If the pattern has no capture group and
            pattern_group_missing is "error", or if it does not compile
    """
    compiled = compile_pattern(pattern)
    if compiled.groups:
        return compiled

    if pattern_group_missing != "wrap":
        raise ConfigurationError("pattern must contain a capture group")

    # compiled.flags already carries any inline global flags
    source = _LEADING_FLAGS_RE.sub("", compiled.pattern)
    if compiled.flags & re.VERBOSE:
        # a trailing comment would swallow the closing paren
        source += "\n"
    try:
        return re.compile(f"({source})", compiled.flags)
    except re.error as e:
        raise ConfigurationError(f"Cannot wrap link pattern {compiled.pattern!r}: {e}") from e


def find_all_matches(
    text: str,
    pattern: "re.Pattern[str]",
    normalize_unicode: bool = False,
    invalid_slug: str = "convert",
    maintain_case: bool = False,
) -> List[SlugMatch]:
    """
    Find every link reference in text, in order and without overlaps.

    The scan position is threaded through explicitly. Zero-width matches
    bump it forward by one character, and the loop never runs more than
    len(text) + 1 times whatever the pattern.

    Raises:
        InvalidSlugError: If a slug is invalid and invalid_slug is "error"
    """
    matches: List[SlugMatch] = []
    position = 0
    max_iterations = len(text) + 1

    for _ in range(max_iterations):
        match = pattern.search(text, position)
        if match is None:
            break

        raw_slug = match.group(1) or match.group(0)
        if normalize_unicode:
            raw_slug = unicodedata.normalize("NFKC", raw_slug)

        slug = resolve_slug(raw_slug, invalid_slug=invalid_slug, maintain_case=maintain_case)
        matches.append(SlugMatch(raw=match.group(0), slug=slug, start=match.start(), end=match.end()))

        position = match.end()
        if position == match.start():
            position += 1
        if position > len(text):
            break

    return matches
