"""Scoring of timing metric budgets.

Timing rows are ternary: under budget passes, an overshoot
within the tolerance window is ``average``, and anything
beyond ``budget + tolerance`` fails.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from perfbudget.models import budget as budget_models
from perfbudget.models import results
from perfbudget.utils import logger

log = logger.create_logger("Score-Timings")

TIMING_LABELS: Final[dict[budget_models.TimingMetric, str]] = {
    "first-contentful-paint": "First Contentful Paint",
    "first-cpu-idle": "First CPU Idle",
    "interactive": "Time to Interactive",
    "first-meaningful-paint": "First Meaningful Paint",
    "max-potential-fid": "Max Potential First Input Delay",
}


def score_timing(
    actual_ms: int | float,
    budget_ms: int | float,
    tolerance_ms: int | float | None = None,
) -> tuple[int | float, results.Verdict]:
    """Compare a measured time against its budget.

    Returns:
        ``(difference, verdict)`` where ``difference`` is
        ``actual - budget``.
    """
    difference = actual_ms - budget_ms
    if actual_ms < budget_ms:
        return difference, "pass"
    if actual_ms < budget_ms + (tolerance_ms or 0):
        return difference, "average"
    return difference, "fail"


def analyse_timings(
    budgets: Iterable[budget_models.TimingBudget],
    measurements: Mapping[str, int | float],
) -> list[results.ScoredRow]:
    """Score every timing budget that has a measurement.

    Args:
        budgets: The governing budget's ``timings``.
        measurements: Milliseconds keyed by metric name.

    Returns:
        Rows sorted by descending difference.  Metrics with no
        measurement are left out.
    """
    rows = []
    for entry in budgets:
        actual = measurements.get(entry.metric)
        if actual is None:
            log.warn("No measurement for timing budget", {"metric": entry.metric})
            continue
        difference, verdict = score_timing(actual, entry.budget, entry.tolerance)
        rows.append(
            results.ScoredRow(
                id=entry.metric,
                label=TIMING_LABELS[entry.metric],
                budget=entry.budget,
                actual=actual,
                difference=difference,
                verdict=verdict,
                tolerance=entry.tolerance,
            )
        )
    return sorted(rows, key=lambda r: r.difference, reverse=True)
