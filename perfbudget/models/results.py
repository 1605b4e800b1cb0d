"""Pydantic models for scored rows and evaluation results."""

from __future__ import annotations

import typing
from typing import Literal

import pydantic

from perfbudget.models import budget, resources
from perfbudget.utils import serialization

Verdict = Literal["pass", "average", "fail"]


class _ResultModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )


class SummaryRow(_ResultModel):
    """One row of the resource summary table."""

    resource_type: budget.ResourceType
    label: str
    count: int
    size: int | float


class ScoredRow(_ResultModel):
    """An actual value compared against one budget entry.

    ``budget`` is in bytes for size rows, requests for count
    rows and milliseconds for timing rows.  A negative
    ``difference`` means the value is under budget.
    """

    id: str
    label: str
    budget: int | float
    actual: int | float
    difference: int | float
    verdict: Verdict
    tolerance: int | float | None = None


class BudgetTableRow(_ResultModel):
    """Over-budget amounts for a resource type that has a budget."""

    resource_type: budget.ResourceType
    label: str
    request_count: int
    size: int | float
    size_over_budget: int | float | None = None
    count_over_budget: int | float | None = None


class EvaluationResult(_ResultModel):
    """Everything the reporting layer needs for one page."""

    page_url: str
    budget_path: str | None = None
    not_applicable: bool = False
    resource_summary: dict[str, resources.ResourceStat] = pydantic.Field(default_factory=dict)
    third_party: resources.ResourceStat = pydantic.Field(default_factory=resources.ResourceStat)
    summary_rows: list[SummaryRow] = pydantic.Field(default_factory=list)
    budget_table: list[BudgetTableRow] = pydantic.Field(default_factory=list)
    resource_sizes: list[ScoredRow] = pydantic.Field(default_factory=list)
    resource_counts: list[ScoredRow] = pydantic.Field(default_factory=list)
    timings: list[ScoredRow] = pydantic.Field(default_factory=list)
    score: Verdict | None = None

    def to_json(self) -> dict[str, typing.Any]:
        """Dump with camelCase keys for the reporting layer."""
        return self.model_dump(mode="json", by_alias=True)
