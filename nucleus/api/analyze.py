"""POST /api/analyze — score a finished stroke."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from nucleus.dependencies import get_analyzer, get_history
from nucleus.engine.analyzer import CircleAnalyzer
from nucleus.history.store import HistoryStore
from nucleus.models.requests import AnalyzeRequest
from nucleus.models.responses import AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    req: AnalyzeRequest,
    analyzer: CircleAnalyzer = Depends(get_analyzer),
    history: HistoryStore = Depends(get_history),
) -> AnalyzeResponse:
    start = time.perf_counter()
    stroke = [(p.x, p.y) for p in req.points]
    center = (req.center.x, req.center.y) if req.center is not None else None

    result = analyzer.analyze(stroke, center)
    recorded = history.record(result) if req.record else False
    elapsed = (time.perf_counter() - start) * 1000

    logger.info(
        "Analyzed %d samples: score=%d too_small=%s not_closed=%s in %.1fms",
        len(stroke),
        result.score,
        result.is_too_small,
        result.not_closed,
        elapsed,
    )
    return AnalyzeResponse(
        **result.to_dict(),
        recorded=recorded,
        processing_time_ms=round(elapsed, 3),
    )
