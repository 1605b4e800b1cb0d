"""
URL and hostname helpers shared by budget matching and
third-party classification.
"""

from __future__ import annotations

import re
from urllib import parse

# Characters browsers leave unescaped in a URL path / query.
_PATH_SAFE = "/%:@!$&'()*+,;=[]|^\\"
_QUERY_SAFE = "/%:@!$&()*+,;=[]|^\\?`{}"

_TWO_PART_TLDS = frozenset([
    "co.uk", "com.au", "co.nz", "co.jp", "com.br",
    "co.in", "org.uk", "net.uk", "gov.uk",
])


def is_data_url(url: str) -> bool:
    """Return True for inline ``data:`` URLs."""
    return url[:5].lower() == "data:"


def extract_hostname(url: str) -> str:
    """Return the hostname of *url*, or ``""`` when it has none.

    Data URLs and unparsable strings have no hostname.
    """
    try:
        return parse.urlsplit(url).hostname or ""
    except ValueError:
        return ""


def extract_path(url: str) -> str:
    """Return the path plus query string of *url*.

    The scheme, host and fragment are dropped.  An empty path
    is reported as ``/`` and the ``?`` separator is kept only
    when a query is present, e.g.
    ``"https://example.com/a?b=1#top"`` gives ``"/a?b=1"``.
    Spaces and non-ASCII characters are percent-encoded as a
    browser would (``"/café"`` gives ``"/caf%C3%A9"``); existing
    escapes are left alone.  Unparsable URLs give ``""``, which
    no pattern matches.
    """
    try:
        parts = parse.urlsplit(url)
    except ValueError:
        return ""
    path = parse.quote(parts.path or "/", safe=_PATH_SAFE)
    if parts.query:
        return f"{path}?{parse.quote(parts.query, safe=_QUERY_SAFE)}"
    return path


def get_base_domain(domain: str) -> str:
    """Extract the registrable base domain from a full hostname.

    Handles common multi-part TLDs (e.g. ``co.uk``,
    ``com.au``) and strips a leading ``www.`` prefix.

    Args:
        domain: A hostname like ``"www.example.co.uk"``.

    Returns:
        The base domain, e.g. ``"example.co.uk"``.
    """
    clean = re.sub(r"^www\.", "", domain).lower()
    parts = clean.split(".")
    if len(parts) >= 2:
        last_two = ".".join(parts[-2:])
        if last_two in _TWO_PART_TLDS and len(parts) >= 3:
            return ".".join(parts[-3:])
        return last_two
    return clean
