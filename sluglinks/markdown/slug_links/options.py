from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from sluglinks.exceptions import ConfigurationError

# [{#slug}] - ASCII word characters plus accented/other scripts from U+00C0 up
DEFAULT_PATTERN = r"\[\{#([a-zA-Z0-9\-_\u00C0-\uFFFF]+)\}\]"

PATTERN_GROUP_MISSING_CHOICES = ("wrap", "error")
INVALID_SLUG_CHOICES = ("convert", "error")
BOOL_OPTIONS = ("fallback_to_heading_text", "maintain_case", "normalize_unicode")

PatternLike = Union[str, "re.Pattern[str]"]


@dataclass(frozen=True)
class SlugLinkOptions:
    """
    Options for the heading slug link transform.

    Attributes:
        pattern: Link syntax regex (string or compiled). The first capture
            group holds the slug. The default also matches accented and
            non-Latin references such as [{#Café}], so with
            invalid_slug="error" those abort the pass unless
            normalize_unicode folds them to a valid slug first.
        pattern_group_missing: "wrap" to add a capture group around a
            group-less pattern, "error" to reject it.
        fallback_to_heading_text: Resolve slugs against heading text when no
            heading id matches.
        invalid_slug: "convert" to slugify invalid slugs, "error" to raise
            InvalidSlugError.
        maintain_case: Keep letter case when converting invalid slugs.
        normalize_unicode: NFKC-normalize heading text and matched slugs.
    """

    pattern: PatternLike = DEFAULT_PATTERN
    pattern_group_missing: str = "wrap"
    fallback_to_heading_text: bool = False
    invalid_slug: str = "convert"
    maintain_case: bool = False
    normalize_unicode: bool = False

    def __post_init__(self):
        for name in BOOL_OPTIONS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be True or False, got {value!r}")
        if self.pattern_group_missing not in PATTERN_GROUP_MISSING_CHOICES:
            raise ConfigurationError(
                f"pattern_group_missing must be one of {PATTERN_GROUP_MISSING_CHOICES}, "
                f"got {self.pattern_group_missing!r}"
            )
        if self.invalid_slug not in INVALID_SLUG_CHOICES:
            raise ConfigurationError(
                f"invalid_slug must be one of {INVALID_SLUG_CHOICES}, got {self.invalid_slug!r}"
            )
        if not isinstance(self.pattern, (str, re.Pattern)):
            raise ConfigurationError(
                f"pattern must be a string or compiled regex, got {type(self.pattern).__name__}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None, **overrides: Any) -> "SlugLinkOptions":
        """
        Build options from a mapping (e.g. the SLUG_LINKS setting) plus overrides.

        Keys left out, or set to None, keep their defaults.
        """
        merged = dict(values or {})
        merged.update(overrides)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise ConfigurationError(f"Unknown slug link option(s): {', '.join(unknown)}")

        return cls(**{key: value for key, value in merged.items() if value is not None})
