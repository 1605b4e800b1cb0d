"""Budget file validation.

Turns the loosely-typed contents of a budget file into frozen
:class:`~perfbudget.models.budget.Budget` models.  This is the
only place raw configuration is trusted; everything downstream
works with the validated models.

More info on the budget format:
https://github.com/GoogleChrome/lighthouse/issues/6053#issuecomment-428385930
"""

from __future__ import annotations

import json
import math
from typing import Any

from perfbudget.budgets import patterns
from perfbudget.models import budget as budget_models
from perfbudget.utils import logger
from perfbudget.utils.errors import ConfigError, get_error_message

log = logger.create_logger("Budget-Validation")

_BUDGET_KEYS = frozenset({"path", "resourceSizes", "resourceCounts", "timings", "options"})


# ============================================================================
# Shape checks
# ============================================================================


def _is_object(value: object) -> bool:
    return isinstance(value, dict)


def _is_array_of_objects(value: object) -> bool:
    return isinstance(value, list) and all(_is_object(v) for v in value)


def _is_number(value: object) -> bool:
    """Return True for finite ints and floats (booleans excluded).

    Integers too large to represent as a float are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _assert_no_excess_properties(rest: dict[str, Any], object_name: str) -> None:
    if rest:
        keys = ", ".join(rest)
        raise ConfigError(f"{object_name} has unrecognized properties: [{keys}]")


def _assert_no_duplicate_strings(strings: list[str], array_name: str) -> None:
    seen: set[str] = set()
    for value in strings:
        if value in seen:
            raise ConfigError(f"{array_name} has duplicate entry of type '{value}'")
        seen.add(value)


def _clone(raw: object) -> object:
    """Deep-copy *raw* through JSON so live objects cannot leak in."""
    try:
        return json.loads(json.dumps(raw))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Budget file is not valid JSON data: {get_error_message(exc)}") from exc


# ============================================================================
# Entry validation
# ============================================================================


def validate_resource_budget(entry: dict[str, Any]) -> budget_models.ResourceBudget:
    """Validate one ``{resourceType, budget}`` entry.

    Raises:
        ConfigError: On extra keys, an unknown resource type,
            or a budget that is not a finite number.
    """
    rest = dict(entry)
    resource_type = rest.pop("resourceType", None)
    value = rest.pop("budget", None)
    _assert_no_excess_properties(rest, "Resource Budget")

    if resource_type not in budget_models.RESOURCE_TYPES:
        raise ConfigError(
            f"Invalid resource type: {resource_type}. \n"
            f"Valid resource types are: {', '.join(budget_models.RESOURCE_TYPES)}"
        )
    if not _is_number(value):
        raise ConfigError(f"Invalid budget: {value}")
    return budget_models.ResourceBudget(resource_type=resource_type, budget=value)


def validate_timing_budget(entry: dict[str, Any]) -> budget_models.TimingBudget:
    """Validate one ``{metric, budget, tolerance?}`` entry.

    Raises:
        ConfigError: On extra keys, an unknown metric, or a
            budget / tolerance that is not a finite number.
    """
    rest = dict(entry)
    metric = rest.pop("metric", None)
    value = rest.pop("budget", None)
    has_tolerance = "tolerance" in rest
    tolerance = rest.pop("tolerance", None)
    _assert_no_excess_properties(rest, "Timing Budget")

    if metric not in budget_models.TIMING_METRICS:
        raise ConfigError(
            f"Invalid timing metric: {metric}. \n"
            f"Valid timing metrics are: {', '.join(budget_models.TIMING_METRICS)}"
        )
    if not _is_number(value):
        raise ConfigError(f"Invalid budget: {value}")
    if has_tolerance and not _is_number(tolerance):
        raise ConfigError(f"Invalid tolerance: {tolerance}")
    return budget_models.TimingBudget(metric=metric, budget=value, tolerance=tolerance)


def validate_hostname(hostname: object) -> str:
    """Check a first-party hostname, optionally prefixed with ``*.``."""
    error = ConfigError(f"{hostname} is not a valid hostname.")
    if not isinstance(hostname, str) or not hostname:
        raise error
    if "/" in hostname or ":" in hostname or any(ch.isspace() for ch in hostname):
        raise error
    if "*" in hostname and (not hostname.startswith("*.") or hostname.count("*") > 1):
        raise error
    if hostname == "*.":
        raise error
    return hostname


def validate_options(options: dict[str, Any]) -> budget_models.BudgetOptions:
    """Validate a budget's ``options`` object."""
    rest = dict(options)
    hostnames = rest.pop("firstPartyHostnames", [])
    _assert_no_excess_properties(rest, "Options property")

    if not isinstance(hostnames, list):
        raise ConfigError("firstPartyHostnames should be defined as an array of hostnames.")
    return budget_models.BudgetOptions(
        first_party_hostnames=tuple(validate_hostname(h) for h in hostnames)
    )


def _section(raw: dict[str, Any], key: str, index: int) -> list[dict[str, Any]] | None:
    """Return the list under *key*, ``None`` when the key is absent."""
    if key not in raw:
        return None
    value = raw[key]
    if not _is_array_of_objects(value):
        raise ConfigError(f"Invalid {key} entry in budget at index {index}")
    return value


def _validate_budget(raw: dict[str, Any], index: int) -> budget_models.Budget:
    unsupported = [key for key in raw if key not in _BUDGET_KEYS]
    if unsupported:
        raise ConfigError(f"Unsupported budget property: [{', '.join(unsupported)}]")

    path = patterns.validate_path(raw.get("path"))

    resource_sizes = None
    raw_sizes = _section(raw, "resourceSizes", index)
    if raw_sizes is not None:
        resource_sizes = tuple(validate_resource_budget(e) for e in raw_sizes)
        _assert_no_duplicate_strings(
            [e.resource_type for e in resource_sizes], f"budgets[{index}].resourceSizes"
        )

    resource_counts = None
    raw_counts = _section(raw, "resourceCounts", index)
    if raw_counts is not None:
        resource_counts = tuple(validate_resource_budget(e) for e in raw_counts)
        _assert_no_duplicate_strings(
            [e.resource_type for e in resource_counts], f"budgets[{index}].resourceCounts"
        )

    timings = None
    raw_timings = _section(raw, "timings", index)
    if raw_timings is not None:
        timings = tuple(validate_timing_budget(t) for t in raw_timings)
        _assert_no_duplicate_strings([t.metric for t in timings], f"budgets[{index}].timings")

    options = None
    if "options" in raw:
        if not _is_object(raw["options"]):
            raise ConfigError(f"Invalid options entry in budget at index {index}")
        options = validate_options(raw["options"])

    return budget_models.Budget(
        path=path,
        resource_sizes=resource_sizes,
        resource_counts=resource_counts,
        timings=timings,
        options=options,
    )


# ============================================================================
# Public API
# ============================================================================


def initialize_budgets(raw: object) -> list[budget_models.Budget]:
    """Validate the parsed contents of a budget file.

    The input is cloned first, so the caller's object is never
    modified and later changes to it do not affect the result.

    Args:
        raw: Parsed JSON; must be a list of budget objects.

    Returns:
        The budgets in declaration order.

    Raises:
        ConfigError: Describing the first invalid entry found.
    """
    try:
        cloned = _clone(raw)
        if not _is_array_of_objects(cloned):
            raise ConfigError("Budget file is not defined as an array of budgets.")
        budgets = [_validate_budget(b, i) for i, b in enumerate(cloned)]
    except ConfigError as exc:
        log.error("Invalid budget configuration", {"error": get_error_message(exc)})
        raise

    log.debug("Budgets validated", {"count": len(budgets), "paths": [b.path for b in budgets]})
    return budgets
