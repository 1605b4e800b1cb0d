"""Budget scoring package.

One module per kind of budget plus the orchestrator.  The
public API is :func:`evaluate`.
"""

from __future__ import annotations

from perfbudget.scoring.calculator import evaluate, overall_score

__all__ = ["evaluate", "overall_score"]
