"""Bundled default budget.

Used by callers that have no budget file of their own.  It is
raw configuration like any user file: pass it through
:func:`~perfbudget.budgets.validation.initialize_budgets`.
"""

from __future__ import annotations

from typing import Any, Final

DEFAULT_BUDGETS: Final[tuple[dict[str, Any], ...]] = (
    {
        "path": "/",
        "resourceSizes": [
            {"resourceType": "total", "budget": 750},
            {"resourceType": "script", "budget": 300},
            {"resourceType": "image", "budget": 250},
            {"resourceType": "font", "budget": 100},
            {"resourceType": "stylesheet", "budget": 50},
            {"resourceType": "document", "budget": 50},
        ],
    },
)
