"""Per-resource-type request counts and transfer sizes.

Each network record lands in one of seven content buckets plus
the synthetic ``total`` bucket.  Inline ``data:`` URLs are
skipped entirely, their bytes already belong to the document
that embeds them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from perfbudget import config
from perfbudget.models import budget as budget_models
from perfbudget.models import resources, results
from perfbudget.utils import logger, url

log = logger.create_logger("ResourceSummary")

# Content buckets in tie-break order for presentation.
CONTENT_TYPES: Final[tuple[budget_models.ResourceType, ...]] = (
    "document",
    "script",
    "stylesheet",
    "image",
    "media",
    "font",
    "other",
)

_RAW_TYPE_MAP: Final[dict[str, budget_models.ResourceType]] = {
    "document": "document",
    "script": "script",
    "stylesheet": "stylesheet",
    "image": "image",
    "media": "media",
    "font": "font",
}

RESOURCE_LABELS: Final[dict[budget_models.ResourceType, str]] = {
    "total": "Total",
    "document": "Document",
    "script": "Script",
    "stylesheet": "Stylesheet",
    "image": "Image",
    "media": "Media",
    "font": "Font",
    "other": "Other",
    "third-party": "Third-party",
}


def determine_resource_type(record: resources.NetworkRecord) -> budget_models.ResourceType:
    """Map the raw browser resource type onto a content bucket.

    ``"Script"`` and ``"script"`` both map to ``script``;
    missing or unknown types (XHR, Fetch, ...) are ``other``.
    """
    if not record.resource_type:
        return "other"
    return _RAW_TYPE_MAP.get(record.resource_type.lower(), "other")


def _is_favicon(record: resources.NetworkRecord) -> bool:
    return record.url.endswith("/favicon.ico")


def summarize(
    records: Iterable[resources.NetworkRecord],
    settings: config.EngineSettings | None = None,
) -> dict[str, resources.ResourceStat]:
    """Count and size every record per content bucket.

    Returns:
        A mapping with the seven content buckets and ``total``,
        every bucket present even when empty.
    """
    settings = settings or config.get_settings()
    summary = {t: resources.ResourceStat() for t in (*CONTENT_TYPES, "total")}

    skipped = 0
    for record in records:
        if url.is_data_url(record.url):
            skipped += 1
            continue
        resource_type = determine_resource_type(record)
        if settings.skip_favicon and resource_type == "other" and _is_favicon(record):
            skipped += 1
            continue
        summary[resource_type].add(record)
        summary["total"].add(record)

    log.debug(
        "Resources summarised",
        {"requests": summary["total"].count, "bytes": summary["total"].size, "skipped": skipped},
    )
    return summary


def build_summary_rows(
    summary: dict[str, resources.ResourceStat],
    third_party: resources.ResourceStat,
) -> list[results.SummaryRow]:
    """Build the presentation rows of the resource summary table.

    Content rows are sorted by descending size with ``total``
    pinned first and ``third-party`` pinned last.  Equal sizes
    keep the :data:`CONTENT_TYPES` order.
    """
    content = sorted(
        (t for t in CONTENT_TYPES if t in summary),
        key=lambda t: summary[t].size,
        reverse=True,
    )

    def _row(resource_type: budget_models.ResourceType, stat: resources.ResourceStat) -> results.SummaryRow:
        return results.SummaryRow(
            resource_type=resource_type,
            label=RESOURCE_LABELS[resource_type],
            count=stat.count,
            size=stat.size,
        )

    rows = [_row("total", summary["total"])]
    rows.extend(_row(t, summary[t]) for t in content)
    rows.append(_row("third-party", third_party))
    return rows
