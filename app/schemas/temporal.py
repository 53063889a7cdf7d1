from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_serializer

from core.temporal.compare import Outcome
from core.temporal.partial import PartialTemporal, from_fields, to_fields


class PartialTemporalModel(BaseModel):
    """Wire shape of a partial temporal value: specified fields only, from the year down."""

    model_config = ConfigDict(extra="forbid")

    year: StrictInt
    month: Optional[StrictInt] = None
    day: Optional[StrictInt] = None
    hour: Optional[StrictInt] = None
    minute: Optional[StrictInt] = None
    second: Optional[StrictInt] = None
    millisecond: Optional[StrictInt] = None
    offset_minutes: Optional[StrictInt] = None

    @model_serializer(mode="wrap")
    def _drop_unspecified(self, handler: Callable[[Any], Dict[str, Any]]) -> Dict[str, Any]:
        return {name: value for name, value in handler(self).items() if value is not None}

    def to_partial(self) -> PartialTemporal:
        return from_fields(**self.model_dump())

    @classmethod
    def from_partial(cls, value: PartialTemporal) -> "PartialTemporalModel":
        return cls(**to_fields(value))


class ResolveRequest(BaseModel):
    value: Optional[PartialTemporalModel] = None
    ignore_offset: Optional[bool] = None


class ResolveResponse(BaseModel):
    local: Optional[datetime] = None
    instant: Optional[datetime] = None
    granularity: Optional[str] = None


class PairRequest(BaseModel):
    first: Optional[PartialTemporalModel] = None
    second: Optional[PartialTemporalModel] = None


class BestResolutionResponse(BaseModel):
    outcome: Outcome
    value: Optional[PartialTemporalModel] = None
    conflicting_field: Optional[str] = None


class ContainmentResponse(BaseModel):
    result: bool = Field(description="True when both values name the same date or one contains the other")
