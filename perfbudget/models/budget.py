"""Pydantic models for validated performance budgets.

Budgets are frozen once built by
:func:`perfbudget.budgets.validation.initialize_budgets`,
the only place raw configuration is turned into these models.
"""

from __future__ import annotations

import typing
from typing import Literal

import pydantic

from perfbudget.utils import serialization

ResourceType = Literal[
    "total",
    "document",
    "script",
    "stylesheet",
    "image",
    "media",
    "font",
    "other",
    "third-party",
]

TimingMetric = Literal[
    "first-contentful-paint",
    "first-cpu-idle",
    "interactive",
    "first-meaningful-paint",
    "max-potential-fid",
]

RESOURCE_TYPES: tuple[ResourceType, ...] = typing.get_args(ResourceType)
TIMING_METRICS: tuple[TimingMetric, ...] = typing.get_args(TimingMetric)


class _FrozenModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ResourceBudget(_FrozenModel):
    """Size (KB) or request-count threshold for one resource type."""

    resource_type: ResourceType
    budget: int | float


class TimingBudget(_FrozenModel):
    """Millisecond threshold for one timing metric.

    ``tolerance`` widens the window in which an overshoot is
    scored ``average`` instead of ``fail``.
    """

    metric: TimingMetric
    budget: int | float
    tolerance: int | float | None = None


class BudgetOptions(_FrozenModel):
    """Per-budget options."""

    first_party_hostnames: tuple[str, ...] = ()


class Budget(_FrozenModel):
    """One policy unit, applied to pages whose URL matches ``path``."""

    path: str = "/"
    resource_sizes: tuple[ResourceBudget, ...] | None = None
    resource_counts: tuple[ResourceBudget, ...] | None = None
    timings: tuple[TimingBudget, ...] | None = None
    options: BudgetOptions | None = None

    def to_json(self) -> dict[str, typing.Any]:
        """Dump back to the camelCase shape of a budget file."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
