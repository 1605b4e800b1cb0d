"""Performance budget engine.

Validates budget definitions, selects the budget governing a page,
summarises its network resources and scores the measurements
against the declared thresholds.
"""

from __future__ import annotations

from perfbudget.budgets.defaults import DEFAULT_BUDGETS
from perfbudget.budgets.selection import get_matching_budget
from perfbudget.budgets.validation import initialize_budgets
from perfbudget.scoring.calculator import evaluate
from perfbudget.utils.errors import ConfigError

__all__ = [
    "DEFAULT_BUDGETS",
    "ConfigError",
    "evaluate",
    "get_matching_budget",
    "initialize_budgets",
]
