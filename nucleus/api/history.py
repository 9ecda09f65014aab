"""Score history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from nucleus.dependencies import get_history
from nucleus.history.store import HistoryStore
from nucleus.models.responses import (
    CircleResultOut,
    ClearHistoryResponse,
    HistoryResponse,
    StatsResponse,
)

router = APIRouter()


@router.get("/history", response_model=HistoryResponse)
async def list_history(history: HistoryStore = Depends(get_history)) -> HistoryResponse:
    return HistoryResponse(
        entries=[CircleResultOut.from_result(r) for r in history.entries()],
        stats=StatsResponse.from_stats(history.stats()),
    )


@router.delete("/history", response_model=ClearHistoryResponse)
async def clear_history(history: HistoryStore = Depends(get_history)) -> ClearHistoryResponse:
    return ClearHistoryResponse(status="ok", cleared=history.clear())


@router.get("/stats", response_model=StatsResponse)
async def stats(history: HistoryStore = Depends(get_history)) -> StatsResponse:
    return StatsResponse.from_stats(history.stats())
