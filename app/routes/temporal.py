from __future__ import annotations

from fastapi import APIRouter

from app.schemas.temporal import (
    BestResolutionResponse,
    ContainmentResponse,
    PairRequest,
    ResolveRequest,
    ResolveResponse,
)
from app.services.temporal_service import best, contained, resolve

router = APIRouter()


@router.post("/resolve", response_model=ResolveResponse)
def resolve_endpoint(payload: ResolveRequest) -> ResolveResponse:
    return resolve(payload)


@router.post("/best-resolution", response_model=BestResolutionResponse)
def best_resolution_endpoint(payload: PairRequest) -> BestResolutionResponse:
    return best(payload)


@router.post("/same-or-contained", response_model=ContainmentResponse)
def same_or_contained_endpoint(payload: PairRequest) -> ContainmentResponse:
    return contained(payload)
