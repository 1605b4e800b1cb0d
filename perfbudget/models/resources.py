"""Pydantic models for network records and per-bucket statistics."""

from __future__ import annotations

import pydantic

from perfbudget.utils import serialization


class NetworkRecord(pydantic.BaseModel):
    """A network request as reported by the measurement layer.

    ``resource_type`` is the raw browser classification
    (``"Script"``, ``"Image"``, ...) and may be missing.
    ``transfer_size`` may be fractional when the measurement
    layer reports estimated bytes.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    url: str
    resource_type: str | None = None
    transfer_size: pydantic.NonNegativeInt | pydantic.NonNegativeFloat = 0


class ResourceStat(pydantic.BaseModel):
    """Request count and transferred bytes for one bucket."""

    count: int = 0
    size: int | float = 0

    def add(self, record: NetworkRecord) -> None:
        """Count *record* into this bucket."""
        self.count += 1
        self.size += record.transfer_size
