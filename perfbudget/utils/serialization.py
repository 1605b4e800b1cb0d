"""Shared serialization helpers for camelCase conversion.

Budget files and measurement records use camelCase keys while
the models use snake_case attributes; ``snake_to_camel`` is the
alias generator bridging the two.
"""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"first_party_hostnames"``.

    Returns:
        The camelCase equivalent, e.g. ``"firstPartyHostnames"``.
    """
    head, *rest = name.split("_")
    return head + "".join(w.capitalize() for w in rest)
