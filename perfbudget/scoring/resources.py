"""Scoring of resource size and request count budgets.

Size and count rows are binary: a value above its budget
fails, anything else passes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Literal

from perfbudget import config
from perfbudget.analysis.resource_summary import RESOURCE_LABELS
from perfbudget.models import budget as budget_models
from perfbudget.models import resources, results
from perfbudget.utils import logger

log = logger.create_logger("Score-Resources")

Stats = Mapping[str, resources.ResourceStat]


def _by_difference(rows: list[results.ScoredRow]) -> list[results.ScoredRow]:
    """Sort rows so the largest overshoot comes first."""
    return sorted(rows, key=lambda r: r.difference, reverse=True)


def score_size(
    actual_bytes: int | float,
    budget_kb: int | float,
    settings: config.EngineSettings | None = None,
) -> tuple[int | float, int | float, results.Verdict]:
    """Compare a byte total against a budget declared in KB.

    Returns:
        ``(budget_bytes, difference, verdict)``.
    """
    settings = settings or config.get_settings()
    budget_bytes = budget_kb * settings.bytes_per_kb
    verdict: results.Verdict = "fail" if actual_bytes > budget_bytes else "pass"
    return budget_bytes, actual_bytes - budget_bytes, verdict


def score_count(
    actual: int | float,
    budget: int | float,
) -> tuple[int | float, results.Verdict]:
    """Compare a request count against its budget.

    Returns:
        ``(difference, verdict)``.
    """
    verdict: results.Verdict = "fail" if actual > budget else "pass"
    return actual - budget, verdict


def score_resource(
    actual: int | float,
    budget: int | float,
    unit: Literal["KB", "count"],
    settings: config.EngineSettings | None = None,
) -> tuple[int | float, results.Verdict]:
    """Score a size (``"KB"``) or count budget.

    Returns:
        ``(difference, verdict)``; size differences are in bytes.
    """
    if unit == "KB":
        _, difference, verdict = score_size(actual, budget, settings)
        return difference, verdict
    return score_count(actual, budget)


def analyse_sizes(
    budgets: Iterable[budget_models.ResourceBudget],
    stats: Stats,
    settings: config.EngineSettings | None = None,
) -> list[results.ScoredRow]:
    """Score every ``resourceSizes`` entry against *stats*.

    *stats* must include the ``third-party`` aggregate for a
    ``third-party`` budget to see a non-zero actual.
    """
    rows = []
    for entry in budgets:
        stat = stats.get(entry.resource_type)
        actual = stat.size if stat else 0
        budget_bytes, difference, verdict = score_size(actual, entry.budget, settings)
        rows.append(
            results.ScoredRow(
                id=entry.resource_type,
                label=RESOURCE_LABELS[entry.resource_type],
                budget=budget_bytes,
                actual=actual,
                difference=difference,
                verdict=verdict,
            )
        )
    return _by_difference(rows)


def analyse_counts(
    budgets: Iterable[budget_models.ResourceBudget],
    stats: Stats,
) -> list[results.ScoredRow]:
    """Score every ``resourceCounts`` entry against *stats*."""
    rows = []
    for entry in budgets:
        stat = stats.get(entry.resource_type)
        actual = stat.count if stat else 0
        difference, verdict = score_count(actual, entry.budget)
        rows.append(
            results.ScoredRow(
                id=entry.resource_type,
                label=RESOURCE_LABELS[entry.resource_type],
                budget=entry.budget,
                actual=actual,
                difference=difference,
                verdict=verdict,
            )
        )
    return _by_difference(rows)


def build_budget_table(
    budget: budget_models.Budget,
    stats: Stats,
    settings: config.EngineSettings | None = None,
) -> list[results.BudgetTableRow]:
    """Build the over-budget table for the types that have budgets.

    ``size_over_budget`` and ``count_over_budget`` are only set
    when the corresponding budget is exceeded.  Rows are sorted
    by descending ``size_over_budget``.
    """
    settings = settings or config.get_settings()
    sizes = {b.resource_type: b.budget for b in budget.resource_sizes or ()}
    counts = {b.resource_type: b.budget for b in budget.resource_counts or ()}

    rows = []
    for resource_type in budget_models.RESOURCE_TYPES:
        if resource_type not in sizes and resource_type not in counts:
            continue
        stat = stats.get(resource_type) or resources.ResourceStat()

        size_over = None
        if resource_type in sizes:
            budget_bytes = sizes[resource_type] * settings.bytes_per_kb
            if stat.size > budget_bytes:
                size_over = stat.size - budget_bytes

        count_over = None
        if resource_type in counts and stat.count > counts[resource_type]:
            count_over = stat.count - counts[resource_type]

        rows.append(
            results.BudgetTableRow(
                resource_type=resource_type,
                label=RESOURCE_LABELS[resource_type],
                request_count=stat.count,
                size=stat.size,
                size_over_budget=size_over,
                count_over_budget=count_over,
            )
        )

    log.debug("Budget table built", {"rows": len(rows)})
    return sorted(rows, key=lambda r: r.size_over_budget or 0, reverse=True)
