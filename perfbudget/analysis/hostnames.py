"""
First-party / third-party hostname classification.
"""

from __future__ import annotations

from collections.abc import Iterable

from perfbudget.models import budget as budget_models
from perfbudget.utils import url


def is_first_party(hostname: str, allow_list: Iterable[str]) -> bool:
    """Return True when *hostname* matches an allow-list entry.

    A bare entry must equal the hostname.  A ``*.`` entry
    matches any hostname ending in the text after ``*.``, which
    includes the bare domain itself: ``*.example.com`` matches
    both ``cdn.example.com`` and ``example.com``.  Comparison is
    case-sensitive on the raw host string.
    """
    for entry in allow_list:
        if entry.startswith("*."):
            if hostname.endswith(entry[2:]):
                return True
        elif hostname == entry:
            return True
    return False


def first_party_hosts(
    budget: budget_models.Budget | None,
    main_resource_url: str,
) -> list[str]:
    """Return the allow-list to classify a page's requests with.

    The governing budget's ``firstPartyHostnames`` are used when
    set; otherwise the main resource's root domain and all of
    its subdomains count as first-party.
    """
    if budget is not None and budget.options is not None and budget.options.first_party_hostnames:
        return list(budget.options.first_party_hostnames)

    root_domain = url.get_base_domain(url.extract_hostname(main_resource_url))
    return [f"*.{root_domain}"]
