"""robots.txt-style path patterns.

A pattern starts with ``/`` and may hold one ``*`` wildcard and
a single trailing ``$`` end anchor, e.g. ``"/"``, ``"/js$"``,
``"/vendor*chunk"`` or ``"/vendor*chunk.js$"``.  See
https://developers.google.com/search/reference/robots_txt#url-matching-based-on-path-values
"""

from __future__ import annotations

from perfbudget.utils import url as url_utils
from perfbudget.utils.errors import ConfigError

url_path = url_utils.extract_path


def validate_path(value: object) -> str:
    """Check *value* against the pattern grammar.

    ``None`` means the budget applies to every page and yields
    ``"/"``.

    Raises:
        ConfigError: If the pattern is not a string, lacks the
            leading slash, or misplaces ``*`` / ``$``.
    """
    if value is None:
        return "/"
    if not isinstance(value, str):
        raise ConfigError(f"Invalid path {value!r}. 'Path' should be a string.")

    is_valid = (
        value.startswith("/")
        and value.count("*") <= 1
        and value.count("$") <= 1
        and ("$" not in value or value.endswith("$"))
    )
    if not is_valid:
        raise ConfigError(
            f"Invalid path {value}. "
            "'Path' should be specified using the 'robots.txt' format.\n"
            "Learn more about the 'robots.txt' format here:\n"
            "https://developers.google.com/search/reference/robots_txt#url-matching-based-on-path-values"
        )
    return value


def path_matches_pattern(path: str, pattern: str) -> bool:
    """Match a URL path (plus query) against a validated pattern.

    - ``/cat``: the path starts with the pattern.
    - ``/js$``: the path equals the pattern minus the anchor.
    - ``/vendor*chunk``: the path starts with the part before
      ``*`` and the remainder contains the part after it.
    - ``/vendor*chunk.js$``: the path starts with the part
      before ``*`` and ends with the part after it.
    """
    has_wildcard = "*" in pattern
    has_anchor = pattern.endswith("$")

    if not has_wildcard:
        if has_anchor:
            return path == pattern[:-1]
        return path.startswith(pattern)

    before, after = pattern.split("*", 1)
    if not path.startswith(before):
        return False
    if has_anchor:
        # Prefix and suffix may overlap.
        return path.endswith(after[:-1])
    return after in path[len(before):]


def url_matches_pattern(url: str, pattern: str) -> bool:
    """Determine whether a full URL matches *pattern*."""
    return path_matches_pattern(url_path(url), pattern)
