"""Third-party request count and transfer size.

Computed independently of the content buckets: a third-party
script counts both as ``script`` and towards this total.
"""

from __future__ import annotations

from collections.abc import Iterable

from perfbudget.analysis import hostnames
from perfbudget.models import budget as budget_models
from perfbudget.models import resources
from perfbudget.utils import logger, url

log = logger.create_logger("ThirdPartySummary")


def summarize(
    records: Iterable[resources.NetworkRecord],
    budget: budget_models.Budget | None,
    main_resource_url: str,
) -> resources.ResourceStat:
    """Total the records whose host is not first-party.

    Args:
        records: The page's network records.
        budget: The governing budget, whose
            ``firstPartyHostnames`` option (if any) defines
            first-party hosts.
        main_resource_url: URL of the page's main document,
            whose root domain is first-party when the budget
            has no hostnames configured.

    Returns:
        The third-party aggregate.
    """
    allow_list = hostnames.first_party_hosts(budget, main_resource_url)
    stat = resources.ResourceStat()
    third_party_hosts: set[str] = set()

    for record in records:
        if url.is_data_url(record.url):
            continue
        hostname = url.extract_hostname(record.url)
        if not hostname:
            continue
        if not hostnames.is_first_party(hostname, allow_list):
            stat.add(record)
            third_party_hosts.add(hostname)

    log.debug(
        "Third-party resources summarised",
        {
            "first_party_hosts": allow_list,
            "requests": stat.count,
            "bytes": stat.size,
            "hosts": sorted(third_party_hosts)[:10],
        },
    )
    return stat
