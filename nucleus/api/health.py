"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from nucleus import __version__
from nucleus.dependencies import get_analyzer
from nucleus.engine.analyzer import CircleAnalyzer
from nucleus.models.responses import HealthResponse, TierOut, TiersResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(analyzer: CircleAnalyzer = Depends(get_analyzer)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        min_samples=analyzer.config.min_samples,
    )


@router.get("/tiers", response_model=TiersResponse)
async def tiers(analyzer: CircleAnalyzer = Depends(get_analyzer)) -> TiersResponse:
    return TiersResponse(
        tiers=[TierOut(threshold=t.threshold, label=t.label) for t in analyzer.config.tiers]
    )
