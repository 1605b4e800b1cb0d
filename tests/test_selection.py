"""Tests for perfbudget.budgets.selection: governing budget lookup."""

from __future__ import annotations

from perfbudget.budgets import selection, validation
from perfbudget.models import budget as budget_models


def _budgets(*paths: str) -> list[budget_models.Budget]:
    return validation.initialize_budgets([{"path": p} for p in paths])


class TestGetMatchingBudget:
    """Tests for get_matching_budget()."""

    def test_specific_budget_overrides_global(self) -> None:
        budgets = _budgets("/", "/checkout")
        assert selection.get_matching_budget(budgets, "https://example.com/checkout/step1") is budgets[1]

    def test_falls_back_to_global(self) -> None:
        budgets = _budgets("/", "/checkout")
        assert selection.get_matching_budget(budgets, "https://example.com/about") is budgets[0]

    def test_last_match_wins_regardless_of_specificity(self) -> None:
        budgets = _budgets("/checkout", "/")
        assert selection.get_matching_budget(budgets, "https://example.com/checkout") is budgets[1]

    def test_wildcard_budget(self) -> None:
        budgets = _budgets("/", "/*.html$")
        assert selection.get_matching_budget(budgets, "https://example.com/a/page.html") is budgets[1]
        assert selection.get_matching_budget(budgets, "https://example.com/a/page.php") is budgets[0]

    def test_query_string_participates(self) -> None:
        budgets = _budgets("/", "/search?q=")
        assert selection.get_matching_budget(budgets, "https://example.com/search?q=shoes") is budgets[1]
        assert selection.get_matching_budget(budgets, "https://example.com/search") is budgets[0]

    def test_no_match_returns_none(self) -> None:
        budgets = _budgets("/checkout", "/cart$")
        assert selection.get_matching_budget(budgets, "https://example.com/about") is None

    def test_no_budgets(self) -> None:
        assert selection.get_matching_budget(None, "https://example.com/") is None
        assert selection.get_matching_budget([], "https://example.com/") is None

    def test_selection_is_repeatable(self) -> None:
        budgets = _budgets("/", "/checkout")
        first = selection.get_matching_budget(budgets, "https://example.com/checkout")
        second = selection.get_matching_budget(budgets, "https://example.com/checkout")
        assert first is second
