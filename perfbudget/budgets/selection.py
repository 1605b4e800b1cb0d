"""Selection of the budget governing a page."""

from __future__ import annotations

from collections.abc import Sequence

from perfbudget.budgets import patterns
from perfbudget.models import budget as budget_models
from perfbudget.utils import logger

log = logger.create_logger("Budget-Selection")


def get_matching_budget(
    budgets: Sequence[budget_models.Budget] | None,
    url: str,
) -> budget_models.Budget | None:
    """Return the budget that applies to *url*, if any.

    Budgets are scanned in declaration order and the last one
    whose ``path`` matches wins, so a catch-all ``"/"`` budget
    declared first is overridden by more specific ones after it.

    Returns:
        The governing budget, or ``None`` when nothing matches.
    """
    if not budgets:
        return None

    path = patterns.url_path(url)
    matched: budget_models.Budget | None = None
    for budget in budgets:
        if patterns.path_matches_pattern(path, budget.path):
            matched = budget

    if matched is None:
        log.info("No budget matches page", {"url": url, "budgets": len(budgets)})
    else:
        log.debug("Budget selected", {"url": url, "path": matched.path})
    return matched
