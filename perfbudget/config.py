"""
Engine configuration.

Centralises the environment variable names and defaults that
tune how measurements are compared against budgets.

Uses ``pydantic_settings.BaseSettings`` for automatic environment
variable binding, type coercion, and validation.
"""

from __future__ import annotations

import functools

import pydantic
import pydantic_settings


class EngineSettings(pydantic_settings.BaseSettings):
    """Settings for resource summarising and size scoring.

    Attributes:
        bytes_per_kb: Multiplier converting declared KB budgets
            into bytes.
        skip_favicon: Drop ``other``-typed ``/favicon.ico``
            requests from the resource summary.  Some browsers
            never request it, so counting it makes totals
            differ between measurement backends.
    """

    model_config = pydantic_settings.SettingsConfigDict(populate_by_name=True)

    bytes_per_kb: int = pydantic.Field(
        default=1024, gt=0, validation_alias="PERF_BUDGET_BYTES_PER_KB"
    )
    skip_favicon: bool = pydantic.Field(
        default=True, validation_alias="PERF_BUDGET_SKIP_FAVICON"
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return the process-wide settings, read once from the environment."""
    return EngineSettings()
