"""Glue between the HTTP/CLI request models and the pure comparison core."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException

from app.deps import get_settings
from app.schemas.temporal import (
    BestResolutionResponse,
    ContainmentResponse,
    PairRequest,
    PartialTemporalModel,
    ResolveRequest,
    ResolveResponse,
)
from core.temporal.compare import best_resolution, same_or_contained
from core.temporal.partial import InvalidPartialTemporal, PartialTemporal
from core.temporal.resolver import to_earliest_local_datetime, to_utc_instant

logger = logging.getLogger(__name__)


def _build(model: Optional[PartialTemporalModel]) -> Optional[PartialTemporal]:
    if model is None:
        return None
    try:
        return model.to_partial()
    except InvalidPartialTemporal as exc:
        logger.warning("Rejected partial temporal value %s: %s", model.model_dump(exclude_none=True), exc)
        raise HTTPException(
            status_code=422,
            detail={"code": "INVALID_PARTIAL_TEMPORAL", "message": str(exc)},
        ) from exc


def resolve(payload: ResolveRequest) -> ResolveResponse:
    value = _build(payload.value)
    ignore_offset = payload.ignore_offset
    if ignore_offset is None:
        ignore_offset = get_settings().ignore_offset_default
    return ResolveResponse(
        local=to_earliest_local_datetime(value, ignore_offset),
        instant=to_utc_instant(value, ignore_offset),
        granularity=value.granularity.value if value is not None else None,
    )


def best(payload: PairRequest) -> BestResolutionResponse:
    result = best_resolution(_build(payload.first), _build(payload.second))
    return BestResolutionResponse(
        outcome=result.outcome,
        value=PartialTemporalModel.from_partial(result.value) if result.value is not None else None,
        conflicting_field=result.conflicting_field,
    )


def contained(payload: PairRequest) -> ContainmentResponse:
    return ContainmentResponse(result=same_or_contained(_build(payload.first), _build(payload.second)))
