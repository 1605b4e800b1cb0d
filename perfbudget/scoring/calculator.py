"""Page evaluation orchestrator.

Selects the governing budget, summarises the page's network
records, scores every configured size, count and timing budget
and rolls the rows up into one verdict.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from perfbudget import config
from perfbudget.analysis import resource_summary, third_party_summary
from perfbudget.budgets import selection
from perfbudget.models import budget as budget_models
from perfbudget.models import resources, results
from perfbudget.scoring import resources as resource_scoring
from perfbudget.scoring import timings as timing_scoring
from perfbudget.utils import logger

log = logger.create_logger("Evaluation")


def overall_score(rows: Iterable[results.ScoredRow]) -> results.Verdict:
    """Roll rows up into a single verdict.

    ``fail`` if any row fails, else ``average`` if any row is
    within its tolerance window, else ``pass``.
    """
    has_average = False
    for row in rows:
        if row.verdict == "fail":
            return "fail"
        if row.verdict == "average":
            has_average = True
    return "average" if has_average else "pass"


def evaluate(
    budgets: Sequence[budget_models.Budget] | None,
    page_url: str,
    records: Iterable[resources.NetworkRecord],
    timings: Mapping[str, int | float] | None = None,
    main_resource_url: str | None = None,
    settings: config.EngineSettings | None = None,
) -> results.EvaluationResult:
    """Evaluate one page against its governing budget.

    The log buffer of the current context is cleared first, so
    after the call it holds this evaluation's lines only.

    The resource summary is always produced.  When no budget
    matches *page_url* the result is marked not applicable and
    carries no scored rows.

    Args:
        budgets: Validated budgets in declaration order.
        page_url: The requested page URL, used for selection.
        records: The page's network records.
        timings: Measured metric values in milliseconds, keyed
            by metric name (e.g. ``"interactive"``).
        main_resource_url: URL of the main document after
            redirects; defaults to *page_url*.
        settings: Engine settings; read from the environment
            when omitted.

    Returns:
        The :class:`EvaluationResult` for the page.
    """
    settings = settings or config.get_settings()
    main_resource_url = main_resource_url or page_url
    records = list(records)

    logger.clear_log_buffer()

    log.start_timer("evaluate")
    budget = selection.get_matching_budget(budgets, page_url)

    summary = resource_summary.summarize(records, settings)
    third_party = third_party_summary.summarize(records, budget, main_resource_url)
    result = results.EvaluationResult(
        page_url=page_url,
        resource_summary=summary,
        third_party=third_party,
        summary_rows=resource_summary.build_summary_rows(summary, third_party),
    )

    if budget is None:
        result.not_applicable = True
        log.end_timer("evaluate", "Evaluation finished without a budget")
        return result

    stats = {**summary, "third-party": third_party}
    result.budget_path = budget.path
    result.budget_table = resource_scoring.build_budget_table(budget, stats, settings)
    if budget.resource_sizes:
        result.resource_sizes = resource_scoring.analyse_sizes(budget.resource_sizes, stats, settings)
    if budget.resource_counts:
        result.resource_counts = resource_scoring.analyse_counts(budget.resource_counts, stats)
    if budget.timings:
        result.timings = timing_scoring.analyse_timings(budget.timings, timings or {})

    result.score = overall_score([*result.resource_sizes, *result.resource_counts, *result.timings])

    log.info(
        "Page evaluated",
        {
            "url": page_url,
            "path": budget.path,
            "score": result.score,
            "requests": summary["total"].count,
        },
    )
    log.end_timer("evaluate")
    return result
